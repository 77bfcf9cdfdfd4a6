"""aiohttp application and process entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

import aiohttp
from aiohttp import web

from .config import Settings
from .handler import TemperatureHandler, error_response
from .http import CepLookupClient, OpenMeteoClient, PostalLookup, WeatherLookup

_LOGGER = logging.getLogger(__name__)

SETTINGS_KEY = web.AppKey("settings", Settings)
HANDLER_KEY = web.AppKey("handler", TemperatureHandler)

_Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def json_error_middleware(
    request: web.Request, handler: _Handler
) -> web.StreamResponse:
    """Render framework errors and unexpected failures as JSON bodies."""
    try:
        return await handler(request)
    except web.HTTPException as exc:
        if exc.status < 400:
            raise
        return error_response(exc.status, exc.reason)
    except Exception:
        _LOGGER.exception("Unhandled error serving %s %s", request.method, request.path)
        return error_response(500, "Internal server error")


async def _temperature(request: web.Request) -> web.Response:
    return await request.app[HANDLER_KEY].handle(request)


def create_app(
    settings: Settings | None = None,
    *,
    postal: PostalLookup | None = None,
    weather: WeatherLookup | None = None,
) -> web.Application:
    """Build the application.

    Real upstream clients sharing one pooled ``aiohttp.ClientSession`` are
    created at startup unless ``postal`` and ``weather`` are supplied.

    Args:
        settings: Listener and upstream settings; defaults apply if omitted
        postal: Replacement postal lookup, e.g. a test double
        weather: Replacement weather lookup, e.g. a test double
    """
    settings = settings or Settings()
    app = web.Application(middlewares=[json_error_middleware])
    app[SETTINGS_KEY] = settings

    async def upstream_clients(app: web.Application) -> AsyncIterator[None]:
        if postal is not None and weather is not None:
            app[HANDLER_KEY] = TemperatureHandler(postal, weather)
            yield
            return

        async with aiohttp.ClientSession() as session:
            app[HANDLER_KEY] = TemperatureHandler(
                postal
                or CepLookupClient(
                    session,
                    base_url=settings.postal_base_url,
                    timeout=settings.postal_timeout,
                ),
                weather
                or OpenMeteoClient(
                    session,
                    base_url=settings.weather_base_url,
                    timeout=settings.weather_timeout,
                ),
            )
            yield

    app.cleanup_ctx.append(upstream_clients)
    # "/" routes an empty code to the handler so it is rejected with 422
    app.router.add_get("/", _temperature)
    app.router.add_get("/{cep}", _temperature)
    return app


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    defaults = Settings()
    parser = argparse.ArgumentParser(
        prog="cep-temperature",
        description="Serve current temperature by Brazilian postal code.",
    )
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the HTTP server until interrupted."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(host=args.host, port=args.port)
    _LOGGER.info("Server is running on port %s", settings.port)
    # Client disconnects cancel the handler task and its upstream request
    web.run_app(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        handler_cancellation=True,
        print=None,
    )
