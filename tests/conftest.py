"""Shared pytest fixtures for CLI integration checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}:{existing}"
    env.pop("COLUMNATE_WIDTH", None)
    env["PYTHONIOENCODING"] = "utf-8"
    return env


@pytest.fixture
def run_columnate(tmp_path: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(
        args: list[str],
        *,
        stdin: str = "",
        env: dict[str, str] | None = None,
        timeout: float = 15.0,
    ) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "columnate", *args],
            cwd=tmp_path,
            env={**cli_env, **(env or {})},
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
