"""Response schema for the root endpoint."""

from pydantic import BaseModel, ConfigDict, Field

DEMO_MESSAGE = "Hello from demo NPM project!"


class DemoResponse(BaseModel):
    """Payload returned by ``GET /``.

    ``library_version`` is serialized as ``lodashVersion``; the value is the
    installed version of pydash, the Python port of lodash.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = DEMO_MESSAGE
    timestamp: str
    library_version: str = Field(alias="lodashVersion")
