"""Lazy, case-insensitive file index over one lexicon directory tree."""

from __future__ import annotations

import os
import re
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from lexicon_index.core.app_config import LexiconConfig
from lexicon_index.core.locale import fold

WalkFn = Callable[..., Iterable[tuple[str, list[str], list[str]]]]


class DirectoryUnavailable(OSError):
    """Raised when the index root cannot be traversed."""

    def __init__(self, root: Path, reason: str) -> None:
        """Initialize with the failing root and a short reason."""
        super().__init__(f"lexicon directory {root} is unavailable: {reason}")
        self.root = root
        self.reason = reason


def _normalize_key(relative: str | os.PathLike[str]) -> str:
    return fold(os.fspath(relative).replace("\\", "/"))


class DirectoryIndex:
    """Map case-folded relative paths under *root* to on-disk paths.

    Nothing touches the filesystem until the first query; the tree is then
    walked exactly once and the result is kept for the lifetime of the
    instance. Files added or removed afterwards are not noticed.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        follow_symlinks: bool | None = None,
        config: LexiconConfig | None = None,
        walk: WalkFn = os.walk,
    ) -> None:
        self._root = Path(os.path.abspath(os.fspath(root)))
        if follow_symlinks is None:
            follow_symlinks = (config or LexiconConfig()).follow_symlinks
        self._follow_symlinks = follow_symlinks
        self._walk = walk
        self._entries: dict[str, Path] = {}
        self._view: Mapping[str, Path] = MappingProxyType(self._entries)
        self._built = False
        self._failure: DirectoryUnavailable | None = None
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    directory = root

    @property
    def follow_symlinks(self) -> bool:
        return self._follow_symlinks

    def add_entry(
        self,
        relative: str | os.PathLike[str],
        absolute: str | os.PathLike[str] | None = None,
    ) -> Path:
        """Register one file and return the absolute path stored for it."""
        with self._lock:
            return self._insert(relative, absolute)

    def _insert(
        self,
        relative: str | os.PathLike[str],
        absolute: str | os.PathLike[str] | None,
    ) -> Path:
        path = self._root / relative if absolute is None else Path(absolute)
        self._entries[_normalize_key(relative)] = path
        return path

    def build_index(self) -> Mapping[str, Path]:
        """Walk the tree on first call; later calls return the same mapping."""
        if self._built:
            return self._view
        with self._lock:
            if self._failure is not None:
                raise self._failure
            if not self._built:
                try:
                    self._scan()
                except DirectoryUnavailable as exc:
                    self._failure = exc
                    raise
                self._built = True
        return self._view

    def _scan(self) -> None:
        root = os.fspath(self._root)
        if not os.path.exists(root):
            raise DirectoryUnavailable(self._root, "does not exist")
        if not os.path.isdir(root):
            raise DirectoryUnavailable(self._root, "not a directory")

        def _on_error(exc: OSError) -> None:
            if exc.filename is not None and os.path.abspath(exc.filename) == root:
                raise DirectoryUnavailable(self._root, exc.strerror or str(exc)) from exc
            logger.warning("Skipping unreadable lexicon path {}: {}", exc.filename, exc)

        logger.debug("Indexing lexicon directory {}", root)
        before = len(self._entries)
        for dirpath, _dirnames, filenames in self._walk(
            root, onerror=_on_error, followlinks=self._follow_symlinks
        ):
            for name in filenames:
                absolute = os.path.join(dirpath, name)
                if not os.path.isfile(absolute):
                    continue
                if not self._follow_symlinks and os.path.islink(absolute):
                    continue
                self._insert(os.path.relpath(absolute, root), absolute)
        logger.debug(
            "Indexed {} files under {}", len(self._entries) - before, root
        )

    def lookup(self, key: str) -> Path | None:
        """Return the path registered for *key* (any case), or ``None``."""
        return self.build_index().get(_normalize_key(key))

    def list_domain(self, domain: str) -> list[Path]:
        """List every indexed file that may belong to *domain*.

        Matches keys below a ``<domain>/`` directory and keys whose last
        component starts with the domain name, whatever the extension.
        """
        name = re.escape(fold(domain))
        pattern = re.compile(rf"^{name}/|\b{name}[^/]*$")
        index = self.build_index()
        with self._lock:
            items = list(index.items())
        return [path for key, path in items if pattern.search(key)]

    def keys(self) -> Iterator[str]:
        index = self.build_index()
        with self._lock:
            return iter(list(index))

    def __len__(self) -> int:
        return len(self.build_index())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __repr__(self) -> str:
        state = "built" if self._built else "lazy"
        return f"{type(self).__name__}({str(self._root)!r}, {state})"
