from collections.abc import Callable
from pathlib import Path

import pytest

from lexicon_index.core import app_config


@pytest.fixture(autouse=True)
def _fresh_app_config() -> None:
    app_config.load.cache_clear()


@pytest.fixture()
def make_lexicon(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes empty catalog files below one root."""
    root = tmp_path / "messages"
    root.mkdir()

    def _make(*relative: str) -> Path:
        for rel in relative:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")
        return root

    return _make
