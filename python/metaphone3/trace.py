"""Tracing of emitted key symbols.

An encoder can be given a tracer: a callable receiving one TraceEvent per
symbol actually appended to a key. Without one, nothing is recorded.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

PRIMARY = "primary"
SECONDARY = "secondary"


@dataclass(frozen=True)
class TraceEvent:
    """One symbol appended to a key channel."""

    channel: str    # "primary" or "secondary"
    symbol: str     # what was appended, may be several letters
    position: int   # cursor position in the word when appended
    letter: str     # the word's character at that position

    def to_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "symbol": self.symbol,
            "position": self.position,
            "letter": self.letter,
        }


Tracer = Callable[[TraceEvent], None]


def logging_tracer(
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Tracer:
    """Build a tracer that writes each event to a logger.

    Args:
        logger: Logger to use, defaults to this module's logger.
        level: Log level for the records.

    Returns:
        Tracer callable.
    """
    log = logger or logging.getLogger(__name__)

    def _trace(event: TraceEvent) -> None:
        log.log(
            level,
            "append %s %s at %d (%s)",
            event.channel,
            event.symbol,
            event.position,
            event.letter,
        )

    return _trace


@dataclass
class CollectingTracer:
    """Tracer that keeps every event in memory."""

    events: list[TraceEvent] = field(default_factory=list)

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    def symbols(self, channel: str = PRIMARY) -> list[str]:
        """Symbols appended to one channel, in order."""
        return [e.symbol for e in self.events if e.channel == channel]

    def format(self) -> list[str]:
        """Human readable lines, one per event."""
        return [
            f"{e.position:>3} {e.letter!r:<5} {e.channel:<9} +{e.symbol}"
            for e in self.events
        ]
