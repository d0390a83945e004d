"""Arrange line-oriented text into the widest column layout that fits."""

from columnate.lib.writer import Columnizer, columnate

__version__ = "0.1.0"

__all__ = ["Columnizer", "__version__", "columnate"]
