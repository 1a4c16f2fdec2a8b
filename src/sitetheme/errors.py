class ThemeError(Exception):
    """Base class for theme resolution and materialization errors."""


class ThemeNotFoundError(ThemeError):
    """No theme directory exists and the name isn't the built-in theme."""

    def __init__(self, name: str) -> None:
        super().__init__(f"theme not found: {name!r}")
        self.name = name


class ThemeNotResolvedError(ThemeError):
    """A theme must be resolved before it can be written anywhere."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"cannot {operation}: no theme has been resolved")
        self.operation = operation
