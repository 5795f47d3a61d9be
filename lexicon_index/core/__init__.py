"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .app_config import LexiconConfig
from .app_config import load as load_config
from .directory_index import DirectoryIndex, DirectoryUnavailable
from .locale import Locale, MalformedLocale, normalize_codeset, parse_locale
from .resolver import LocaleResolver, find

__all__ = [
    "DirectoryIndex",
    "DirectoryUnavailable",
    "LexiconConfig",
    "Locale",
    "LocaleResolver",
    "MalformedLocale",
    "find",
    "load_config",
    "normalize_codeset",
    "parse_locale",
]
