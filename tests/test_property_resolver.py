"""Test module for resolver property invariants."""

from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from lexicon_index.core.directory_index import DirectoryIndex
from lexicon_index.core.locale import Locale, parse_locale
from lexicon_index.core.resolver import LocaleResolver

_alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_locales = st.builds(
    Locale,
    language=st.text(alphabet=_alphabet, min_size=2, max_size=3),
    territory=st.none() | st.text(alphabet=_alphabet, min_size=2, max_size=2),
    codeset=st.none() | st.sampled_from(["UTF-8", "utf8", "ISO-8859-1", "8859-15", "koi8-r"]),
    modifier=st.none() | st.sampled_from(["euro", "latin", "cyrillic"]),
)
_domains = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-_", min_size=1, max_size=12)


@given(locale=_locales)
@settings(max_examples=80, deadline=None)
def test_property_parse_round_trips_rendered_locale(locale: Locale) -> None:
    """Rendering a locale and parsing it back yields the same components."""
    assert parse_locale(str(locale)) == locale


@given(locale=_locales, domain=_domains)
@settings(max_examples=60, deadline=None)
def test_property_unmatched_domain_is_absent(locale: Locale, domain: str) -> None:
    """Files for other domains never satisfy a lookup."""
    with tempfile.TemporaryDirectory() as tmp:
        index = DirectoryIndex(tmp)
        index.add_entry(f"{locale}/LC_MESSAGES/zz{domain}zz.po")
        index.add_entry(f"zz{domain}zz/{locale}.po")
        assert LocaleResolver(index).find(domain, str(locale)) is None


@given(locale=_locales, domain=_domains)
@settings(max_examples=60, deadline=None)
def test_property_exact_nested_file_is_found(locale: Locale, domain: str) -> None:
    """A file named exactly after the locale is always returned."""
    with tempfile.TemporaryDirectory() as tmp:
        index = DirectoryIndex(tmp)
        expected = index.add_entry(f"{locale}/LC_MESSAGES/{domain}.po")
        assert LocaleResolver(index).find(domain.upper(), str(locale)) == expected
        assert expected == Path(tmp) / f"{locale}/LC_MESSAGES/{domain}.po"
