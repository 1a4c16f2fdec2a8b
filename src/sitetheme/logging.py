import sys
import traceback
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, TypeAlias

Style: TypeAlias = Callable[[str], str]

_prefix = ContextVar("_prefix", default="")
_style: ContextVar[Style] = ContextVar("_style", default=str)


def log(message: str, exc: BaseException | None = None) -> None:
    """Print a progress line to stderr using the current prefix and style."""
    if exc is not None:
        exception = ": " + "".join(traceback.format_exception_only(exc)).rstrip("\n")
    else:
        exception = ""
    print(_style.get()(f"{_prefix.get()}{message}{exception}"), file=sys.stderr)


@contextmanager
def log_prefix(prefix: str, style: Style | None = None) -> Iterator[None]:
    prefix_token = _prefix.set(_prefix.get() + prefix)
    style_token = _style.set(style) if style else None
    try:
        yield
    finally:
        _prefix.reset(prefix_token)
        if style_token is not None:
            _style.reset(style_token)


def _sgr(on: int, off: int) -> Style:
    def style(s: str) -> str:
        return f"\x1b[{on}m{s}\x1b[{off}m"

    return style


dim = _sgr(2, 22)
red = _sgr(31, 39)
green = _sgr(32, 39)
