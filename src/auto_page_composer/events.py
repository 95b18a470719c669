from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class GenerationEvent(str, Enum):
    input_fetch_degraded = "input_fetch_degraded"
    llm_unavailable = "llm_unavailable"
    component_dropped = "component_dropped"
    duplicate_component_dropped = "duplicate_component_dropped"
    low_confidence_section = "low_confidence_section"
    stage_unfilled = "stage_unfilled"
    below_minimum_sections = "below_minimum_sections"


class EventSink(Protocol):
    def emit(self, event: GenerationEvent, message: str, **fields: Any) -> None:
        ...


class LoggingEventSink:
    """Writes generation diagnostics as structured warnings."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def emit(self, event: GenerationEvent, message: str, **fields: Any) -> None:
        self._log.warning(message, extra={"event": event.value, **fields})


class EventCollector:
    """Forwards to another sink and remembers which events were emitted."""

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink
        self.emitted: list[GenerationEvent] = []

    def emit(self, event: GenerationEvent, message: str, **fields: Any) -> None:
        self.emitted.append(event)
        self._sink.emit(event, message, **fields)

    @property
    def names(self) -> list[str]:
        return list(dict.fromkeys(event.value for event in self.emitted))


__all__ = ["EventCollector", "EventSink", "GenerationEvent", "LoggingEventSink"]
