from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator


@contextmanager
def create_file(path: Path) -> Iterator[BinaryIO]:
    """Open ``path`` for binary writing, creating parent directories first.

    An existing file is truncated. The handle is closed when the block exits,
    whether or not it raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        yield f
