from .assets import STATIC_ASSETS, TEMPLATE_ASSETS, AssetKind, ThemeAssets
from .errors import ThemeError, ThemeNotFoundError, ThemeNotResolvedError
from .files import create_file
from .resources import DEFAULT_THEME_NAME, builtin_assets
from .theme import BUILDS_DIRNAME, THEMES_DIRNAME, Theme, Written

__all__ = [
    "AssetKind",
    "BUILDS_DIRNAME",
    "DEFAULT_THEME_NAME",
    "STATIC_ASSETS",
    "TEMPLATE_ASSETS",
    "THEMES_DIRNAME",
    "Theme",
    "ThemeAssets",
    "ThemeError",
    "ThemeNotFoundError",
    "ThemeNotResolvedError",
    "Written",
    "builtin_assets",
    "create_file",
]
