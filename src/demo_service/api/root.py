"""Root router serving the demo payload."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from demo_service.schemas.demo import DemoResponse

router = APIRouter()


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/", response_model=DemoResponse)
async def read_root(request: Request) -> DemoResponse:
    """Return the demo message, the request time, and the pydash version.

    The version is read once during lifespan startup and stored on
    ``request.app.state.library_version``.
    """
    return DemoResponse(
        timestamp=utc_timestamp(),
        library_version=request.app.state.library_version,
    )
