from pathlib import Path

import pytest

from sitetheme import create_file


class TestCreateFile:
    def test_creates_parents(self, tmp_path: Path):
        dest = tmp_path / "a" / "b" / "c.bin"
        with create_file(dest) as f:
            f.write(b"\x00\x01")
        assert dest.read_bytes() == b"\x00\x01"

    def test_truncates(self, tmp_path: Path):
        dest = tmp_path / "file.txt"
        dest.write_bytes(b"a much longer previous content")
        with create_file(dest) as f:
            f.write(b"short")
        assert dest.read_bytes() == b"short"

    def test_closed_on_error(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            with create_file(tmp_path / "f") as f:
                raise RuntimeError("boom")
        assert f.closed

    def test_parent_is_a_file(self, tmp_path: Path):
        (tmp_path / "static").write_bytes(b"")
        with pytest.raises(OSError):
            with create_file(tmp_path / "static" / "img" / "logo.png"):
                pass
