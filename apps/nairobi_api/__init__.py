"""Nairobi greeting service.

:class:`NairobiApi` holds the four route handlers.  Each handler builds its
response from module constants and, for ``/api`` and ``/time``, a single
reading of the injected clock.  :data:`ROUTES` maps every served path to its
handler and media type; the HTTP layer in :mod:`apps.nairobi_api.main` is
generated from that mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict

from lib.contracts.api_response import ApiResponse
from lib.utils.helpers import format_long_time, format_timestamp, local_now


HOME_TEXT = (
    "Welcome to my Go API! 🇰🇪\n"
    "Visit /api for JSON response\n"
    "Visit /about for project info\n"
    "Visit /time for current time"
)
ABOUT_TEXT = (
    "Go Capstone Project\n"
    "Built by: Trina Luseno\n"
    "School: Moringa School\n"
    "Tech: Go 1.21.6"
)
GREETING = "Hello from Nairobi!"
LOCATION = "Nairobi, Kenya 🇰🇪"
STATUS_SUCCESS = "success"
TIME_PREFIX = "Current Time: "

TEXT_PLAIN = "text/plain"
APPLICATION_JSON = "application/json"


@dataclass
class NairobiApi:
    """Stateless route handlers.

    Parameters
    ----------
    clock: callable returning the current local time.  Tests pin it to a
        fixed :class:`~datetime.datetime`.
    """

    clock: Callable[[], datetime] = field(default=local_now)

    def home(self) -> str:
        return HOME_TEXT

    def api(self) -> ApiResponse:
        return ApiResponse(
            message=GREETING,
            location=LOCATION,
            status=STATUS_SUCCESS,
            timestamp=format_timestamp(self.clock()),
        )

    def about(self) -> str:
        return ABOUT_TEXT

    def current_time(self) -> str:
        return TIME_PREFIX + format_long_time(self.clock())


@dataclass(frozen=True)
class Route:
    handler: Callable[[NairobiApi], Any]
    media_type: str


# Exact-match paths only; anything else falls through to the server's 404.
ROUTES: Dict[str, Route] = {
    "/": Route(NairobiApi.home, TEXT_PLAIN),
    "/api": Route(NairobiApi.api, APPLICATION_JSON),
    "/about": Route(NairobiApi.about, TEXT_PLAIN),
    "/time": Route(NairobiApi.current_time, TEXT_PLAIN),
}


__all__ = ["ApiResponse", "NairobiApi", "Route", "ROUTES"]
