from __future__ import annotations

from pathlib import Path


def derive_namespace(file_path: Path, src_dir: Path) -> str:
    """``components/button/locale/en.json`` -> ``components.button``."""
    parts = file_path.relative_to(src_dir).parts
    # drop the locale dir and the filename
    return ".".join(parts[:-2])


def component_dir(file_path: Path) -> Path:
    return file_path.parent.parent


def locale_code(file_path: Path) -> str:
    return file_path.stem
