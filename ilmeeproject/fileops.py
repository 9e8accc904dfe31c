"""File operations behind the asset browser: copy, import, rename, delete, create."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .templates import script_header, script_source

DEFAULT_FOLDER_NAME = "New Folder"
DEFAULT_FILE_NAME = "NewFile"
DEFAULT_SCRIPT_NAME = "NewScript"

PathLike = str | os.PathLike[str]


class FileOperationError(Exception):
    """A file operation could not be carried out."""


def copy_destination(source: PathLike, target_folder: PathLike) -> Path:
    """Where ``source`` lands in ``target_folder``; a taken name gets a '_copy' suffix."""
    src = Path(source)
    target = Path(target_folder) / src.name
    if target.exists():
        target = Path(target_folder) / f"{src.stem}_copy{src.suffix}"
    return target


def paste(source: PathLike | None, target_folder: PathLike) -> Path:
    """Copy a file or a whole folder into ``target_folder`` and return the copy."""
    if not source:
        raise FileOperationError("No item in clipboard!")
    src = Path(source)
    target = copy_destination(src, target_folder)
    try:
        if src.is_dir():
            shutil.copytree(src, target, dirs_exist_ok=True)
        else:
            shutil.copy2(src, target)
    except OSError as exc:
        raise FileOperationError(str(exc)) from exc
    return target


def import_file(source: PathLike | None, target_folder: PathLike) -> Path:
    """Copy one file into ``target_folder`` and return the copy."""
    if not source:
        raise FileOperationError("No file selected!")
    src = Path(source)
    target = copy_destination(src, target_folder)
    try:
        shutil.copy2(src, target)
    except OSError as exc:
        raise FileOperationError(str(exc)) from exc
    return target


def rename_entry(path: PathLike, new_name: str, is_directory: bool) -> Path:
    """Rename within the same folder; a file keeps its extension if none is given."""
    if not new_name:
        raise FileOperationError("Name cannot be empty")
    old = Path(path)
    new_path = old.parent / new_name
    if not is_directory and old.suffix and not Path(new_name).suffix:
        new_path = old.parent / (new_name + old.suffix)
    if new_path.exists():
        raise FileOperationError("A file or folder with this name already exists")
    try:
        old.rename(new_path)
    except OSError as exc:
        raise FileOperationError(str(exc)) from exc
    return new_path


def delete_path(path: PathLike) -> int:
    """Delete a file or a folder with its contents; return how many items went."""
    target = Path(path)
    if not target.exists() and not target.is_symlink():
        return 0
    try:
        if target.is_dir() and not target.is_symlink():
            count = 1 + sum(1 for _ in target.rglob("*"))
            shutil.rmtree(target)
            return count
        target.unlink()
        return 1
    except OSError as exc:
        raise FileOperationError(f"Error deleting {target}: {exc}") from exc


def create_folder(parent: PathLike, name: str = DEFAULT_FOLDER_NAME) -> Path:
    """Create a new folder in ``parent``."""
    folder = Path(parent) / name
    try:
        folder.mkdir()
    except FileExistsError as exc:
        raise FileOperationError(f"Folder already exists: {folder}") from exc
    except OSError as exc:
        raise FileOperationError(f"Error creating folder: {exc}") from exc
    return folder


def create_empty_file(folder: PathLike, name: str = DEFAULT_FILE_NAME) -> Path:
    """Create an empty ``<name>.txt`` in ``folder``."""
    path = Path(folder) / f"{name or DEFAULT_FILE_NAME}.txt"
    if path.exists():
        raise FileOperationError("File already exists.")
    try:
        path.touch()
    except OSError as exc:
        raise FileOperationError(str(exc)) from exc
    return path


def create_script_pair(folder: PathLike, name: str = DEFAULT_SCRIPT_NAME) -> tuple[Path, Path]:
    """Write a script's .cpp and .hpp from the templates and return both paths."""
    base = name or DEFAULT_SCRIPT_NAME
    cpp = Path(folder) / f"{base}.cpp"
    hpp = Path(folder) / f"{base}.hpp"
    if cpp.exists() or hpp.exists():
        raise FileOperationError("File already exists.")
    try:
        cpp.write_text(script_source(base))
        hpp.write_text(script_header(base))
    except OSError as exc:
        raise FileOperationError(str(exc)) from exc
    return cpp, hpp