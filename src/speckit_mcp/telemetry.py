"""Per-request telemetry for tool calls and resource reads.

The server wraps every dispatched request in :func:`track`, which times
the block and emits one event when it ends, whether it returned or
raised.  Where the event goes is up to the sink handed to
``SpecKitServer``:

- ``NoOpTelemetrySink`` discards it (library default)
- ``LoggerTelemetrySink`` writes it to the ``speckit_mcp.telemetry`` logger
  (``speckit-mcp serve``)
- ``InMemoryTelemetrySink`` keeps it for assertions in tests
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@contextmanager
def track(sink: TelemetrySink, name: str, **attributes: Any) -> Iterator[dict[str, Any]]:
    """Emit ``name`` once the block finishes, with ``ok`` and ``latency_ms``.

    The yielded dict can be extended inside the block; its entries are
    merged into the event attributes.  Exceptions are re-raised after
    the event is emitted with ``ok=False``.
    """
    extra: dict[str, Any] = {}
    start = time.perf_counter()
    ok = True
    try:
        yield extra
    except Exception:
        ok = False
        raise
    finally:
        attrs = {**attributes, **extra}
        attrs["ok"] = ok
        attrs["latency_ms"] = round((time.perf_counter() - start) * 1000, 3)
        sink.emit(TelemetryEvent(name=name, attributes=attrs))


@dataclass
class TelemetryEvent:
    """``tool_call`` or ``resource_read``, with the request's attributes."""

    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    timestamp_ms: float = field(default_factory=lambda: time.time() * 1000)


@runtime_checkable
class TelemetrySink(Protocol):
    def emit(self, event: TelemetryEvent) -> None: ...


class NoOpTelemetrySink:
    def emit(self, event: TelemetryEvent) -> None:
        return None


class InMemoryTelemetrySink:
    """Collects events in ``events``; ``named`` narrows them to one kind."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []

    def emit(self, event: TelemetryEvent) -> None:
        self.events.append(event)

    def named(self, name: str) -> list[TelemetryEvent]:
        return [event for event in self.events if event.name == name]


class LoggerTelemetrySink:
    """Logs each event at INFO, attributes attached to the record."""

    def __init__(self, logger_name: str = "speckit_mcp.telemetry") -> None:
        self.logger = logging.getLogger(logger_name)

    def emit(self, event: TelemetryEvent) -> None:
        self.logger.info(
            "%s ok=%s latency_ms=%s",
            event.name,
            event.attributes.get("ok"),
            event.attributes.get("latency_ms"),
            extra={
                "event_name": event.name,
                "event_timestamp_ms": event.timestamp_ms,
                "event_attributes": event.attributes,
            },
        )
