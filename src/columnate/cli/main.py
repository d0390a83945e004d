"""Cyclopts CLI entry point for columnate."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from columnate import __version__
from columnate.lib.config.settings import load_config
from columnate.lib.writer import Columnizer

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

STDIN_MARKER = "-"

app = App(
    name="columnate",
    help=(
        "Arrange input lines into the widest column layout narrower than --width. "
        "Logging: -v/--verbose (repeatable) and --log-json write diagnostics to stderr."
    ),
    version=__version__,
    help_formatter="plain",
)


def _read_input(paths: Sequence[str]) -> str:
    if not paths:
        return sys.stdin.read()
    parts: list[str] = []
    for raw in paths:
        if raw == STDIN_MARKER:
            parts.append(sys.stdin.read())
            continue
        parts.append(Path(raw).expanduser().read_text(encoding="utf-8"))
    return "".join(parts)


@app.default
def columnate_command(
    *files: Annotated[str, Parameter(help="Input files. Reads stdin when none are given.")],
    width: Annotated[
        int | None,
        Parameter(name=["--width", "-w"], help="Total output width; lines stay below it."),
    ] = None,
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a columnate TOML config file."),
    ] = None,
) -> None:
    """Columnate FILES (or stdin) to stdout."""

    settings = load_config(
        Path(config).expanduser() if config is not None else None,
        width=width,
    )
    text = _read_input(files)
    # Input normally ends with a newline; don't turn it into a blank last row.
    text = text.removesuffix("\n")

    writer = Columnizer(sys.stdout, settings.width)
    writer.write(text)
    writer.flush()
    sys.stdout.flush()
    logger.info("columnated", width=settings.width, chars=len(text))


def _extract_logging_options(argv: Sequence[str]) -> tuple[list[str], int, bool]:
    verbosity = 0
    json_mode = False
    cleaned: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            cleaned.extend(argv[index:])
            break
        if arg == "--log-json":
            json_mode = True
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            continue
        if arg == "-vv":
            verbosity += 2
            continue
        cleaned.append(arg)
    return cleaned, verbosity, json_mode


def _operation_error_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def _silence_stdout() -> None:
    # Reader went away; point stdout at devnull so interpreter shutdown
    # doesn't raise a second BrokenPipeError while flushing.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `columnate` and `python -m columnate`."""

    from columnate.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, verbosity, json_mode = _extract_logging_options(args)
    configure_logging(json_mode=json_mode, verbosity=verbosity)

    try:
        app(cleaned_args)
    except BrokenPipeError:
        _silence_stdout()
        raise SystemExit(0) from None
    except (ValueError, FileNotFoundError, OSError) as exc:
        print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
        raise SystemExit(1) from None
