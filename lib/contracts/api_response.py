"""ApiResponse model returned by the ``/api`` route."""
from pydantic import BaseModel, ConfigDict


class ApiResponse(BaseModel):
    """Greeting payload serialised as the ``/api`` JSON body.

    Only ``timestamp`` varies between calls; the remaining fields are fixed
    by the service.
    """

    model_config = ConfigDict(extra="forbid")

    message: str
    location: str
    status: str
    timestamp: str
