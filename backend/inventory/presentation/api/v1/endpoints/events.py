"""Server-Sent Events stream of record store changes."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from inventory.application.services import SSEManager
from inventory.infrastructure.dependencies import get_sse_manager

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("")
async def store_event_stream(
    sse: SSEManager = Depends(get_sse_manager),
) -> StreamingResponse:
    """SSE endpoint for live store updates.

    Clients connect via EventSource and receive ``users.changed`` and
    ``products.changed`` events after every add, edit and delete.
    """
    return StreamingResponse(
        sse.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
