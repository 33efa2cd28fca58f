"""Correlation IDs for submissions.

One correlation ID follows a submission from the HTTP request through
vote verification to the ledger commit. It lives in a ContextVar, so it
survives ``await`` boundaries and the key-lookup tasks that
``asyncio.gather`` spawns (tasks copy the current context).

Usage:
    with correlation_scope(request.headers.get("X-Correlation-ID")) as cid:
        result = await executor.submit(...)

    processors = [..., correlation_id_processor, ...]
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "no correlation established"
_correlation_id: ContextVar[str] = ContextVar("master_gate_correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a new UUID4 correlation ID."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current correlation ID, or "" if none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under a correlation ID, restoring the previous one after.

    Args:
        correlation_id: ID to use; a new one is generated when None or empty.

    Yields:
        The correlation ID in effect inside the block.
    """
    effective = correlation_id or generate_correlation_id()
    token = _correlation_id.set(effective)
    try:
        yield effective
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every entry that lacks one."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
