"""Lexicon lookup configuration loaded from repository-local settings."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import Any

from lexicon_index.core.locale import fold

tomllib: ModuleType | None
try:  # Python 3.11+
    tomllib = importlib.import_module("tomllib")
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None


@dataclass(frozen=True, slots=True)
class LexiconConfig:
    """Store catalog naming conventions and traversal settings."""

    catalog_ext: str = ".po"
    category_dir: str = "lc_messages"
    follow_symlinks: bool = True


def _load_toml(path: Path) -> dict[str, Any]:
    if tomllib is None or not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError):
        return {}


def normalize_ext(value: str) -> str:
    """Return *value* with a single leading dot."""
    value = value.strip()
    return value if value.startswith(".") else f".{value}"


def _normalize_category(value: Any, *, default: str) -> str:
    raw = fold(str(value)).strip().strip("/")
    if not raw or "/" in raw or "\\" in raw:
        return default
    return raw


def _normalize_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    raw = str(value).strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


@lru_cache(maxsize=8)
def load(root: Path) -> LexiconConfig:
    """Load the `[lexicon]` table from `<root>/config/app.toml`.

    Only the given project root is consulted; the working directory never is.
    Index and resolver use built-in defaults unless handed the result.
    """
    cfg = LexiconConfig()
    data = _load_toml(Path(root).resolve() / "config" / "app.toml")
    lexicon = data.get("lexicon", {})
    if not isinstance(lexicon, dict):
        return cfg
    ext = lexicon.get("catalog_ext", cfg.catalog_ext)
    cfg = LexiconConfig(
        catalog_ext=(
            normalize_ext(ext)
            if isinstance(ext, str) and ext.strip()
            else cfg.catalog_ext
        ),
        category_dir=_normalize_category(
            lexicon.get("category_dir", cfg.category_dir),
            default=cfg.category_dir,
        ),
        follow_symlinks=_normalize_bool(
            lexicon.get("follow_symlinks", cfg.follow_symlinks),
            default=cfg.follow_symlinks,
        ),
    )
    return cfg
