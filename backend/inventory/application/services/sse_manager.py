"""SSE Manager — in-process event broadcaster for record store changes."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

from inventory.application.interfaces import StoreListener
from inventory.domain.entities import StoreChange

logger = logging.getLogger(__name__)


class SSEManager:
    """Manages SSE client connections and broadcasts store updates.

    Each connected client gets its own bounded asyncio.Queue. Publishing
    pushes the event to all queues; a client that falls too far behind is
    disconnected. Clients consume events via an async generator.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self._max_queue_size = max_queue_size
        self._queues: list[asyncio.Queue[str | None]] = []
        self._loop: asyncio.AbstractEventLoop | None = None

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Subscribe to SSE events. Yields formatted SSE strings.

        The generator automatically unsubscribes when the client disconnects.
        """
        self._loop = asyncio.get_running_loop()
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._max_queue_size)
        self._queues.append(queue)
        try:
            while True:
                event = await queue.get()
                if event is None:
                    break
                yield event
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    def publish(self, event_type: str, data: dict[str, Any]) -> None:
        """Queue an SSE event for every connected client.

        Must be called from the thread running the event loop.
        """
        sse_message = f"event: {event_type}\ndata: {json.dumps(data)}\n\n"
        dead_queues: list[asyncio.Queue[str | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(sse_message)
            except asyncio.QueueFull:
                dead_queues.append(queue)
                logger.warning("SSE client queue full — disconnecting")

        for q in dead_queues:
            self._queues.remove(q)
            self._close_queue(q)

    def publish_threadsafe(self, event_type: str, data: dict[str, Any]) -> None:
        """Publish from any thread.

        Off the loop thread the event is handed to the loop that serves the
        clients; with no client ever connected there is nobody to notify.
        """
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            self.publish(event_type, data)
        else:
            loop.call_soon_threadsafe(self.publish, event_type, data)

    def relay(self, topic: str) -> StoreListener:
        """Build a store listener that forwards changes as ``<topic>.changed`` events.

        Stores call their listeners on the mutating thread, which may be a
        worker thread.
        """

        def forward(change: StoreChange) -> None:
            self.publish_threadsafe(
                f"{topic}.changed",
                {
                    "kind": change.kind.value,
                    "record_ids": list(change.record_ids),
                    "count": change.count,
                    "version": change.version,
                },
            )

        return forward

    async def shutdown(self) -> None:
        """Disconnect all connected clients."""
        for queue in self._queues:
            self._close_queue(queue)
        self._queues.clear()

    @property
    def client_count(self) -> int:
        return len(self._queues)

    @staticmethod
    def _close_queue(queue: asyncio.Queue[str | None]) -> None:
        """Wake the consumer with the end-of-stream marker, making room if needed."""
        while True:
            try:
                queue.put_nowait(None)
                return
            except asyncio.QueueFull:
                queue.get_nowait()
