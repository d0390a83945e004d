"""Core columnate library exports."""

from columnate.lib.layout import Column, Layout, search_layout, split_rows, total_width, widen
from columnate.lib.ports import TextSink
from columnate.lib.writer import Columnizer, columnate

__all__ = [
    "Column",
    "Columnizer",
    "Layout",
    "TextSink",
    "columnate",
    "search_layout",
    "split_rows",
    "total_width",
    "widen",
]
