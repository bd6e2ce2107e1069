"""Expose the Nairobi greeting service over HTTP.

Every entry of :data:`apps.nairobi_api.ROUTES` becomes one endpoint that
accepts any common method and ignores the request entirely.  Paths outside
the table get FastAPI's default 404.
"""

from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from apps.nairobi_api import APPLICATION_JSON, ROUTES, NairobiApi, Route
from lib.config.server_loader import ServerConfig, load_server_config
from lib.telemetry.logger import get_logger, setup_logging


HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = get_logger(__name__)


def _endpoint(service: NairobiApi, route: Route) -> Callable[[], Any]:
    async def endpoint():
        return route.handler(service)

    endpoint.__name__ = route.handler.__name__
    endpoint.__doc__ = route.handler.__doc__
    return endpoint


def create_app(service: Optional[NairobiApi] = None) -> FastAPI:
    """Build the ASGI app serving ``ROUTES`` from ``service``."""

    service = service or NairobiApi()
    app = FastAPI(
        title="Nairobi API",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    for path, route in ROUTES.items():
        response_class = (
            JSONResponse if route.media_type == APPLICATION_JSON else PlainTextResponse
        )
        app.add_api_route(
            path,
            _endpoint(service, route),
            methods=HTTP_METHODS,
            response_class=response_class,
        )
    return app


app = create_app()


def banner_lines(config: ServerConfig) -> List[str]:
    base = config.base_url
    return [
        "🚀 Server starting...",
        f"📍 Visit: {base}",
        f"📍 API:   {base}/api",
        f"📍 About: {base}/about",
        f"📍 Time:  {base}/time",
    ]


def main() -> None:
    config = load_server_config()
    setup_logging(config.log_level)
    for line in banner_lines(config):
        logger.info(line)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    main()
