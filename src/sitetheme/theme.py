"""The theme store.

A :class:`Theme` is bound to a project root and holds the ten asset slots of at
most one resolved theme. It is meant for use by a single build process; callers
sharing one store between threads must serialize access themselves.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .assets import AssetKind, ThemeAssets
from .errors import ThemeNotFoundError, ThemeNotResolvedError
from .files import create_file
from .logging import dim, green, log, log_prefix, red
from .resources import DEFAULT_THEME_NAME, builtin_assets

THEMES_DIRNAME = "_themes"
BUILDS_DIRNAME = "_builds"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Written:
    kind: AssetKind
    src: str
    dest: Path

    def __str__(self) -> str:
        return f"  {green('OK')} {dim(self.src)} -> {dim(str(self.dest))}"


class Theme:
    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)
        self._name = ""
        self._assets: ThemeAssets | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self._root)!r}, name={self._name!r})"

    @property
    def root(self) -> Path:
        return self._root

    @property
    def name(self) -> str:
        """Name of the resolved theme, or ``""`` if none is resolved."""
        return self._name

    @property
    def resolved(self) -> bool:
        return self._assets is not None

    @property
    def assets(self) -> ThemeAssets | None:
        return self._assets

    @property
    def templates(self) -> dict[str, str]:
        if self._assets is None:
            return {}
        return self._assets.templates()

    @property
    def themes_dir(self) -> Path:
        return self._root / THEMES_DIRNAME

    @property
    def source_dir(self) -> Path:
        return self.themes_dir / self._name

    @property
    def output_dir(self) -> Path:
        return self._root / BUILDS_DIRNAME

    def __getitem__(self, kind: AssetKind) -> bytes:
        if self._assets is None:
            return b""
        return self._assets[kind]

    def clear(self) -> None:
        self._name = ""
        self._assets = None

    def _install(self, name: str, assets: ThemeAssets) -> None:
        self.clear()
        self._name = name
        self._assets = assets

    def resolve(self, name: str) -> None:
        """Load theme ``name``, preferring ``<root>/_themes/<name>`` on disk.

        The built-in theme is used only when no directory of that name exists.
        Raises :class:`OSError` if the directory exists but any of its files
        can't be read, and :class:`ThemeNotFoundError` for an unknown name.
        The store is left untouched whenever an exception is raised.
        """
        if not name:
            raise ThemeNotFoundError(name)
        src_dir = self.themes_dir / name
        if src_dir.exists():
            logger.debug("Loading theme %r from %s", name, src_dir)
            assets = ThemeAssets.read(src_dir)
        elif name == DEFAULT_THEME_NAME:
            logger.debug("Loading built-in theme %r", name)
            assets = builtin_assets()
        else:
            raise ThemeNotFoundError(name)
        self._install(name, assets)

    load = resolve

    def _require_assets(self, operation: str) -> ThemeAssets:
        if self._assets is None:
            raise ThemeNotResolvedError(operation)
        return self._assets

    def _write(
        self, items: Iterable[tuple[AssetKind, bytes]], dest_dir: Path
    ) -> list[Written]:
        written = []
        with log_prefix(f"[theme {self._name}] "):
            for kind, data in items:
                dest = dest_dir / kind.relpath
                try:
                    with create_file(dest) as f:
                        f.write(data)
                except OSError as e:
                    log(f"{red('FAIL')} writing {dest}", exc=e)
                    raise
                result = Written(
                    kind=kind, src=f"{self._name}/{kind.relpath}", dest=dest
                )
                log(str(result))
                written.append(result)
        return written

    def materialize_source(self) -> list[Written]:
        """Write the full theme to ``<root>/_themes/<name>`` for editing.

        Does nothing if that directory already exists. Files written before a
        failure are left in place.
        """
        assets = self._require_assets("materialize theme source")
        dest_dir = self.source_dir
        if dest_dir.exists():
            logger.debug("Theme directory %s already exists; skipping", dest_dir)
            return []
        logger.debug("Initializing theme %r in %s", self._name, dest_dir)
        return self._write(assets.items(), dest_dir)

    init_dir = materialize_source

    def materialize_output(self) -> list[Written]:
        """Write the static assets (never the templates) to ``<root>/_builds``.

        Existing files are overwritten.
        """
        assets = self._require_assets("materialize theme output")
        logger.debug("Exporting static assets of theme %r", self._name)
        return self._write(assets.static(), self.output_dir)

    export_static = materialize_output
