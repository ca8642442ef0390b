"""Structured event logging for request-store operations.

Each store mutation runs under a trace id and a timed span, and emits one
JSON object per line on stdout. Rendered scripts are never logged; events
carry identifiers and request metadata only.
"""

from __future__ import annotations

import json
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator


@dataclass
class Span:
    name: str
    trace_id: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_ns: int = field(default_factory=time.time_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        if self.end_ns is None:
            self.end_ns = time.time_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0


def new_trace_id() -> str:
    return uuid.uuid4().hex


def format_event(event: str, *, trace_id: str, span: Span | None = None, **fields: Any) -> str:
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id, **fields}
    if span is not None:
        payload['span'] = {
            'name': span.name,
            'span_id': span.span_id,
            'duration_ms': span.duration_ms,
            'attributes': span.attributes,
        }
    return json.dumps(payload, ensure_ascii=False, default=str)


class EventLogger:
    """Emit JSON event lines through ``sink`` (``print`` by default)."""

    def __init__(self, *, enabled: bool = True, sink: Callable[[str], None] | None = None) -> None:
        self._enabled = enabled
        self._sink = sink or print

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log_event(self, event: str, *, trace_id: str, span: Span | None = None, **fields: Any) -> None:
        if not self._enabled:
            return
        self._sink(format_event(event, trace_id=trace_id, span=span, **fields))

    @contextmanager
    def span(self, name: str, *, trace_id: str | None = None, **attributes: Any) -> Iterator[Span]:
        """Time a block; the span is ended on every exit path."""
        span = Span(name=name, trace_id=trace_id or new_trace_id(), attributes=dict(attributes))
        try:
            yield span
        finally:
            span.end()
