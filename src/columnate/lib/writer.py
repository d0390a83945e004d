"""File-like writer that arranges its input into columns on flush."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import structlog

from columnate.lib.layout import Layout, max_row_width, search_layout, split_rows

if TYPE_CHECKING:
    from columnate.lib.ports import TextSink

logger = structlog.get_logger(__name__)


class Columnizer:
    """Buffer text and write it to ``sink`` as columns when flushed.

    Text written to a Columnizer is arranged so that every output line stays
    narrower than ``max_width`` whenever more than one column fits. Nothing
    reaches the sink until :meth:`flush` is called.

    The buffer survives a flush: flushing again after more writes columnates
    everything written since construction (or since the last :meth:`reset`).
    """

    def __init__(self, sink: TextSink, max_width: int) -> None:
        self._sink = sink
        self._max_width = max_width
        self._chunks: list[str] = []

    @property
    def max_width(self) -> int:
        return self._max_width

    def write(self, data: str | bytes) -> int:
        """Append ``data`` to the internal buffer. The sink is not touched.

        Bytes are decoded as UTF-8. Returns the length of ``data`` as given.
        """

        if isinstance(data, bytes | bytearray):
            self._chunks.append(bytes(data).decode("utf-8"))
            return len(data)
        if not isinstance(data, str):
            raise TypeError(
                f"write() argument must be str or bytes, not {type(data).__name__}"
            )
        self._chunks.append(data)
        return len(data)

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def reset(self) -> None:
        self._chunks.clear()

    def flush(self) -> None:
        """Columnate the buffered text and write it to the sink.

        Sink errors propagate as-is; lines written before the failure stay
        written.
        """

        rows = split_rows(self.getvalue())
        if not rows:
            return
        row_width = max_row_width(rows)
        layout = search_layout(rows, self._max_width, row_width=row_width)
        written = self._emit(layout, row_width)
        logger.debug("flushed", lines=written, columns=len(layout.columns))

    def _emit(self, layout: Layout, row_width: int) -> int:
        last = len(layout.columns) - 1
        for index in range(layout.height):
            cells: list[str] = []
            for position, column in enumerate(layout.columns):
                if index >= len(column.rows):
                    break
                cell = column.rows[index]
                cells.append(cell if position == last else cell.ljust(row_width + 1))
            self._sink.write("".join(cells) + "\n")
        return layout.height


def columnate(text: str, max_width: int) -> str:
    """Return ``text`` arranged into columns narrower than ``max_width``."""
    sink = io.StringIO()
    writer = Columnizer(sink, max_width)
    writer.write(text)
    writer.flush()
    return sink.getvalue()
