"""Gettext-compatible translation file lookup over a :class:`DirectoryIndex`.

Candidates are tried in a fixed order. First the nested layout, with the
``<category>/<domain>`` prefix fully exhausted before the bare ``<domain>``
one::

    nl_NL.utf-8/lc_messages/my-domain.po
    nl_NL.utf8/lc_messages/my-domain.po
    nl_NL/lc_messages/my-domain.po
    nl/lc_messages/my-domain.po
    nl_NL.utf-8/my-domain.po
    ...
    nl/my-domain.po

then the flat layout, where every domain has its own directory::

    my-domain/nl_NL.utf-8.po
    my-domain/nl_NL.utf8.po
    my-domain/nl_NL.po
    my-domain/nl.po

Tiers naming a territory are tried with "_" and then with "-" as
separator, so `nl-NL.po` is found as well as `nl_NL.po`. Keys are matched
case-insensitively; the returned path keeps the case found on disk.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from loguru import logger

from lexicon_index.core.app_config import LexiconConfig, normalize_ext
from lexicon_index.core.directory_index import DirectoryIndex
from lexicon_index.core.locale import Locale, fold, parse_locale

LocaleTier = Callable[[Locale, str], str]

# Most specific first: codeset, normalized codeset, no codeset, no territory, language only.
LOCALE_TIERS: tuple[LocaleTier, ...] = (
    lambda loc, sep: (
        f"{loc.language}{loc.territory_fragment(sep)}"
        f"{loc.codeset_fragment}{loc.modifier_fragment}"
    ),
    lambda loc, sep: (
        f"{loc.language}{loc.territory_fragment(sep)}"
        f"{loc.normalized_codeset_fragment}{loc.modifier_fragment}"
    ),
    lambda loc, sep: (
        f"{loc.language}{loc.territory_fragment(sep)}{loc.modifier_fragment}"
    ),
    lambda loc, sep: f"{loc.language}{loc.modifier_fragment}",
    lambda loc, sep: loc.language,
)

# "_" is the gettext form; "-" covers files named after BCP 47 style tags.
TERRITORY_SEPARATORS: tuple[str, ...] = ("_", "-")


def locale_keys(locale: Locale) -> list[str]:
    """Expand the tiers for *locale*, most specific first."""
    keys: list[str] = []
    for tier in LOCALE_TIERS:
        seen: set[str] = set()
        for sep in TERRITORY_SEPARATORS:
            key = tier(locale, sep)
            if key not in seen:
                seen.add(key)
                keys.append(key)
    return keys


def nested_keys(
    domain: str, locale: Locale, *, category: str = "lc_messages"
) -> list[str]:
    """Return nested-layout keys: prefix form outer, specificity inner."""
    tiers = locale_keys(locale)
    keys: list[str] = []
    for suffix in (f"/{category}/{domain}", f"/{domain}"):
        keys.extend(tier + suffix for tier in tiers)
    return keys


def flat_keys(domain: str, locale: Locale) -> list[str]:
    """Return flat-layout keys, ``<domain>/<locale tier>``."""
    return [f"{domain}/{tier}" for tier in locale_keys(locale)]


class LocaleResolver:
    """Find the best translation table for a domain and locale."""

    def __init__(
        self,
        index: DirectoryIndex,
        *,
        extension: str | None = None,
        category: str | None = None,
        config: LexiconConfig | None = None,
    ) -> None:
        cfg = config or LexiconConfig()
        self.index = index
        self.extension = fold(normalize_ext(extension or cfg.catalog_ext))
        self.category = fold(category or cfg.category_dir)

    def candidates(self, domain: str, locale: str | Locale) -> list[str]:
        """Return every key `find` would try, in order, extension included."""
        domain = fold(domain)
        if not isinstance(locale, Locale):
            locale = parse_locale(fold(locale), domain=domain)
        keys = nested_keys(domain, locale, category=self.category)
        keys.extend(flat_keys(domain, locale))
        return [fold(f"{key}{self.extension}") for key in keys]

    def find(self, domain: str, locale: str) -> Path | None:
        """Return the first existing candidate file, or ``None``.

        Raises :class:`MalformedLocale` when the index holds files but
        *locale* does not parse.
        """
        if not len(self.index):
            return None
        for key in self.candidates(domain, locale):
            path = self.index.lookup(key)
            if path is not None:
                logger.debug("Resolved {}/{} to {}", domain, locale, path)
                return path
        return None


def find(
    root: str | os.PathLike[str], domain: str, locale: str
) -> Path | None:
    """One-shot lookup that indexes *root* and resolves *domain*/*locale*."""
    return LocaleResolver(DirectoryIndex(root)).find(domain, locale)
