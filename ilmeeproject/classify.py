"""Classification of project files by extension: kind, colour and import folder."""

from __future__ import annotations

import enum
from pathlib import PurePath

Color = tuple[float, float, float, float]


class FileKind(enum.Enum):
    FOLDER = "folder"
    CPP = "cpp"
    HPP = "hpp"
    VIDEO = "video"
    IMAGE = "image"
    AUDIO = "audio"
    SHADER = "shader"
    OTHER = "other"


_KIND_EXTENSIONS: dict[FileKind, frozenset[str]] = {
    FileKind.CPP: frozenset({".cpp"}),
    FileKind.HPP: frozenset({".hpp"}),
    FileKind.VIDEO: frozenset({".mp4", ".mkv", ".m4a", ".avi", ".mov"}),
    FileKind.IMAGE: frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp"}),
    FileKind.AUDIO: frozenset({".mp3", ".wav", ".ogg"}),
    FileKind.SHADER: frozenset({".glsl", ".shader", ".frag", ".vert"}),
}

_IMPORT_FOLDERS: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({".cpp", ".h", ".hpp"}), "assets/scripts"),
    (frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp"}), "assets/textures"),
    (frozenset({".mp3", ".wav", ".ogg"}), "assets/audio"),
    (frozenset({".mp4", ".mkv", ".avi", ".mov"}), "assets/video"),
)
_DEFAULT_IMPORT_FOLDER = "assets"

_KIND_COLORS: dict[FileKind, Color] = {
    FileKind.FOLDER: (1.0, 0.87, 0.36, 1.0),
    FileKind.CPP: (0.46, 0.78, 1.0, 1.0),
    FileKind.HPP: (0.71, 0.46, 1.0, 1.0),
    FileKind.VIDEO: (1.0, 0.44, 0.37, 1.0),
    FileKind.IMAGE: (0.4, 0.8, 0.4, 1.0),
    FileKind.AUDIO: (0.8, 0.4, 0.8, 1.0),
    FileKind.SHADER: (0.4, 0.8, 0.8, 1.0),
    FileKind.OTHER: (0.8, 0.8, 0.8, 1.0),
}

_DISPLAY_LIMIT = 15
_DISPLAY_KEEP = 12


def _extension(name: str) -> str:
    return PurePath(name).suffix


def file_kind(name: str) -> FileKind:
    """Kind of a file from its extension; matching is case-sensitive."""
    ext = _extension(name)
    for kind, extensions in _KIND_EXTENSIONS.items():
        if ext in extensions:
            return kind
    return FileKind.OTHER


def import_subfolder(path: str) -> str:
    """Project-relative folder an imported file is copied into."""
    ext = _extension(path).lower()
    for extensions, folder in _IMPORT_FOLDERS:
        if ext in extensions:
            return folder
    return _DEFAULT_IMPORT_FOLDER


def kind_color(kind: FileKind) -> Color:
    """RGBA colour used to draw entries of this kind."""
    return _KIND_COLORS[kind]


def display_name(name: str) -> str:
    """Name shortened for the grid view: long names keep 12 characters and '...'."""
    if len(name) > _DISPLAY_LIMIT:
        return name[:_DISPLAY_KEEP] + "..."
    return name