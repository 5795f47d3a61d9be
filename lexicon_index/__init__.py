"""lexicon-index – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    DirectoryIndex,
    DirectoryUnavailable,
    LexiconConfig,
    Locale,
    LocaleResolver,
    MalformedLocale,
    find,
    load_config,
    normalize_codeset,
    parse_locale,
)

try:
    __version__ = metadata.version("lexicon-index")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
