from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Self, override


class AssetKind(Enum):
    """One of the ten fixed files that make up a theme.

    The value is the file's path relative to the theme root, in POSIX form.
    """

    FAVICON = "static/img/favicon.png"
    LOGO = "static/img/logo.png"
    MAIN_CSS = "static/css/main.css"
    HIGHLIGHT_CSS = "static/css/highlight.css"
    MAIN_JS = "static/js/main.js"
    HIGHLIGHT_JS = "static/js/highlight.js"
    BASE = "templates/base.tpl"
    INDEX = "templates/index.tpl"
    POST = "templates/post.tpl"
    TAG = "templates/tag.tpl"

    @property
    def relpath(self) -> str:
        return self.value

    @property
    def path(self) -> PurePosixPath:
        return PurePosixPath(self.value)

    @property
    def is_static(self) -> bool:
        return self.path.parts[0] == "static"

    @property
    def is_template(self) -> bool:
        return self.path.parts[0] == "templates"

    @property
    def template_name(self) -> str:
        if not self.is_template:
            raise ValueError(f"{self.name} is not a template")
        return self.path.name


STATIC_ASSETS: tuple[AssetKind, ...] = tuple(k for k in AssetKind if k.is_static)
TEMPLATE_ASSETS: tuple[AssetKind, ...] = tuple(k for k in AssetKind if k.is_template)


@dataclass(frozen=True, eq=False)
class ThemeAssets(Mapping[AssetKind, bytes]):
    """The contents of every slot of one theme.

    Either all ten slots are present or construction fails, so a half-read
    theme can't be represented.
    """

    contents: Mapping[AssetKind, bytes] = field(repr=False)

    def __post_init__(self) -> None:
        missing = [k.name for k in AssetKind if k not in self.contents]
        if missing:
            raise ValueError(f"missing theme assets: {', '.join(missing)}")
        unknown = [k for k in self.contents if not isinstance(k, AssetKind)]
        if unknown:
            raise ValueError(f"unknown theme assets: {unknown!r}")
        for kind, data in self.contents.items():
            if not isinstance(data, bytes):
                raise ValueError(
                    f"asset {kind.name} must be bytes, not {type(data).__name__}"
                )
        # Copy in enum order so iteration is stable and the caller's dict can't
        # change underneath us.
        object.__setattr__(
            self,
            "contents",
            MappingProxyType({k: self.contents[k] for k in AssetKind}),
        )

    @classmethod
    def read(cls, directory: Path) -> Self:
        """Read every asset file below ``directory``.

        The first failure propagates as an :class:`OSError`; nothing is
        returned for a partially readable directory.
        """
        contents = {}
        for kind in AssetKind:
            contents[kind] = (directory / kind.relpath).read_bytes()
        return cls(contents)

    @override
    def __getitem__(self, kind: AssetKind) -> bytes:
        return self.contents[kind]

    @override
    def __iter__(self) -> Iterator[AssetKind]:
        return iter(self.contents)

    @override
    def __len__(self) -> int:
        return len(self.contents)

    def static(self) -> Iterator[tuple[AssetKind, bytes]]:
        for kind in STATIC_ASSETS:
            yield kind, self.contents[kind]

    def templates(self) -> dict[str, str]:
        """Template text keyed by file name.

        Templates must be UTF-8; anything else raises :class:`UnicodeDecodeError`
        here, while the raw bytes stay available through the mapping.
        """
        return {
            kind.template_name: self.contents[kind].decode() for kind in TEMPLATE_ASSETS
        }
