"""Sink protocol for columnated output."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything accepting sequential text writes (``sys.stdout``, ``io.StringIO``, ...)."""

    def write(self, text: str, /) -> object: ...
