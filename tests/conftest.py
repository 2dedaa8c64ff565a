from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from locale_merge.core.config import Settings, get_settings

LOCALES = ["en", "es"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SRC_DIR", "MESSAGES_DIR", "SUPPORTED_LOCALES", "DEBUG", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    d = tmp_path / "src"
    d.mkdir()
    return d


@pytest.fixture
def messages_dir(tmp_path: Path) -> Path:
    return tmp_path / "messages"


@pytest.fixture
def settings(src_dir: Path, messages_dir: Path) -> Settings:
    return get_settings(SRC_DIR=src_dir, MESSAGES_DIR=messages_dir, SUPPORTED_LOCALES=LOCALES)


@pytest.fixture
def write_fragment(src_dir: Path) -> Callable[..., Path]:
    """write_fragment("components/button", "en", {...}) -> path of the new file."""

    def _write(component: str, locale: str, content: Any, raw: str | None = None) -> Path:
        locale_dir = src_dir / component / "locale" if component else src_dir / "locale"
        locale_dir.mkdir(parents=True, exist_ok=True)
        path = locale_dir / f"{locale}.json"
        path.write_text(raw if raw is not None else json.dumps(content), encoding="utf-8")
        return path

    return _write


def read_output(messages_dir: Path, locale: str) -> Any:
    return json.loads((messages_dir / f"{locale}.json").read_text(encoding="utf-8"))
