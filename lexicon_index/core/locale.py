"""Locale string parsing and codeset normalization for lexicon lookups."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

# language[_territory][.codeset][@modifier]; "-" is accepted as territory separator.
_LOCALE_RE = re.compile(
    r"""
    ^(?P<language>[a-z]{2,3})
    (?:[-_](?P<territory>[a-z]{2}|[0-9]{3}))?
    (?:\.(?P<codeset>[\w-]+))?
    (?:@(?P<modifier>\S+))?$
    """,
    re.IGNORECASE | re.VERBOSE | re.ASCII,
)
_POSIX_NAMES = frozenset({"c", "posix"})
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]", re.ASCII)


def fold(text: str) -> str:
    """Lower-case ASCII letters only, independent of the process locale."""
    return text.translate(_ASCII_FOLD)


def normalize_codeset(codeset: str | None) -> str:
    """Return the gettext-normalized codeset, or ``""`` when nothing remains."""
    if not codeset:
        return ""
    norm = _NON_ALNUM_RE.sub("", fold(codeset))
    if norm and norm.isdigit():
        return f"iso{norm}"
    return norm


class MalformedLocale(ValueError):
    """Raised when a locale string does not follow the gettext grammar."""

    def __init__(self, locale: str, domain: str | None = None) -> None:
        """Keep the offending locale and the searched domain for diagnostics."""
        if domain is None:
            message = f"illegal locale '{locale}'"
        else:
            message = f"illegal locale '{locale}', when looking for {domain}"
        super().__init__(message)
        self.locale = locale
        self.domain = domain


@dataclass(frozen=True, slots=True)
class Locale:
    """Decomposed ``language[_territory][.codeset][@modifier]`` value."""

    language: str
    territory: str | None = None
    codeset: str | None = None
    modifier: str | None = None

    @property
    def normalized_codeset(self) -> str:
        return normalize_codeset(self.codeset)

    def territory_fragment(self, separator: str = "_") -> str:
        return f"{separator}{self.territory}" if self.territory else ""

    @property
    def codeset_fragment(self) -> str:
        return f".{self.codeset}" if self.codeset else ""

    @property
    def normalized_codeset_fragment(self) -> str:
        norm = self.normalized_codeset
        return f".{norm}" if norm else ""

    @property
    def modifier_fragment(self) -> str:
        return f"@{self.modifier}" if self.modifier else ""

    def __str__(self) -> str:
        return (
            f"{self.language}{self.territory_fragment()}"
            f"{self.codeset_fragment}{self.modifier_fragment}"
        )


def parse_locale(text: str, *, domain: str | None = None) -> Locale:
    """Split *text* into its locale components.

    Component case is preserved. ``C`` and ``POSIX`` are accepted as bare
    language names. Anything else outside the grammar raises
    :class:`MalformedLocale`, carrying *domain* when the caller supplies it.
    """
    raw = text.strip() if isinstance(text, str) else ""
    if fold(raw) in _POSIX_NAMES:
        return Locale(language=raw)
    match = _LOCALE_RE.fullmatch(raw)
    if match is None:
        raise MalformedLocale(str(text), domain)
    return Locale(
        language=match.group("language"),
        territory=match.group("territory"),
        codeset=match.group("codeset"),
        modifier=match.group("modifier"),
    )
