"""
Pytest configuration for pig latin tests.
"""

import os
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment for tests."""
    original_env: Dict[str, str] = dict(os.environ)

    for var in ("PIGLATIN_ENCODING", "PIGLATIN_LOG_LEVEL"):
        os.environ.pop(var, None)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str], Path]:
    """Write text to a source file in the temporary directory."""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
