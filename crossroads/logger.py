"""Lightweight event loggers for optional structured output.

Events are a name plus keyword fields. :class:`StdLogger` renders them as
``level event k=v ...`` lines or as one JSON object per line.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Stream logger with a level threshold and optional JSON lines."""

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    @classmethod
    def for_cli(cls, level: str, json_fmt: bool) -> "StdLogger":
        """Return the logger used by the command line.

        JSON lines go to stdout next to the result; text goes to stderr so the
        single result line on stdout stays machine-readable.
        """
        return cls(level=level, json_fmt=json_fmt, stream=sys.stdout if json_fmt else sys.stderr)

    def _enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels.get(self.level, 20)

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit a log ``event`` at ``level`` with additional ``fields``."""
        if not self._enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)


class BoundLogger:
    """Wrap a logger and prepend fixed ``fields`` to every event.

    Fields passed with an event override bound fields of the same name.
    """

    def __init__(self, inner: Logger, **fields: Any) -> None:
        self.inner = inner
        self.fields = fields

    def info(self, event: str, **fields: Any) -> None:
        self.inner.info(event, **{**self.fields, **fields})

    def debug(self, event: str, **fields: Any) -> None:
        self.inner.debug(event, **{**self.fields, **fields})


__all__ = ["Logger", "NoopLogger", "StdLogger", "BoundLogger"]
