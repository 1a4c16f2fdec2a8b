from pathlib import Path
from typing import Callable

import pytest

from sitetheme import AssetKind, Theme


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path / "proj"


@pytest.fixture
def theme(root: Path) -> Theme:
    return Theme(root)


@pytest.fixture
def make_theme_dir(root: Path) -> Callable[..., dict[AssetKind, bytes]]:
    """Lay out a complete theme under ``<root>/_themes`` and return its bytes."""

    def make(name: str, tag: bytes = b"") -> dict[AssetKind, bytes]:
        contents = {}
        for kind in AssetKind:
            data = f"{name}:{kind.relpath}\n".encode() + tag
            path = root / "_themes" / name / kind.relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            contents[kind] = data
        return contents

    return make
