from functools import cache
from importlib.resources import files
from importlib.resources.abc import Traversable

from .assets import AssetKind, ThemeAssets

DEFAULT_THEME_NAME = "simple"

def _builtin_root() -> Traversable:
    return files(__package__) / "builtin" / DEFAULT_THEME_NAME


@cache
def builtin_assets() -> ThemeAssets:
    """The assets of the default theme shipped inside this package."""
    root = _builtin_root()
    contents = {}
    for kind in AssetKind:
        node = root
        for part in kind.path.parts:
            node = node / part
        contents[kind] = node.read_bytes()
    return ThemeAssets(contents)
