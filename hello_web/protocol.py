"""
h11 protocol for uvicorn with a read-header timeout.

A connection gets READ_HEADER_TIMEOUT_SECONDS to deliver a complete request
head. The clock starts when the connection is accepted, and for keep-alive
follow-ups when the first byte of the next request arrives. Body reads,
writes and idle keep-alive waits are not bounded here.
"""
import asyncio
import logging
from typing import Optional

from uvicorn.protocols.http.h11_impl import H11Protocol

logger = logging.getLogger("hello_web.protocol")


class HeaderTimeoutH11Protocol(H11Protocol):
    read_header_timeout: float = 5.0

    def connection_made(self, transport: asyncio.Transport) -> None:
        self._header_timer: Optional[asyncio.TimerHandle] = None
        # cycle of the last request whose head was fully read
        self._headers_done_cycle = None
        super().connection_made(transport)
        self._arm_header_timer()

    def connection_lost(self, exc: Optional[Exception]) -> None:
        self._cancel_header_timer()
        super().connection_lost(exc)

    def data_received(self, data: bytes) -> None:
        if self._header_timer is None and self._awaiting_headers():
            self._arm_header_timer()
        super().data_received(data)
        if self.cycle is not self._headers_done_cycle:
            # h11 produced a Request event: a new cycle now owns the connection
            self._headers_done_cycle = self.cycle
            self._cancel_header_timer()

    def on_response_complete(self) -> None:
        super().on_response_complete()
        # keep-alive: the next request's timer starts with its first byte
        self._cancel_header_timer()

    def _awaiting_headers(self) -> bool:
        return self.cycle is None or self.cycle.response_complete

    def _arm_header_timer(self) -> None:
        self._cancel_header_timer()
        self._header_timer = self.loop.call_later(self.read_header_timeout, self._on_header_timeout)

    def _cancel_header_timer(self) -> None:
        if self._header_timer is not None:
            self._header_timer.cancel()
            self._header_timer = None

    def _on_header_timeout(self) -> None:
        self._header_timer = None
        if self.transport.is_closing():
            return
        logger.info(
            "Closing connection from %s: request headers not received within %ss",
            self.client,
            self.read_header_timeout,
        )
        self.transport.close()


def protocol_with_header_timeout(seconds: float) -> type:
    """Return an H11Protocol subclass bound to the given timeout."""
    return type("HeaderTimeoutH11Protocol", (HeaderTimeoutH11Protocol,), {"read_header_timeout": seconds})
