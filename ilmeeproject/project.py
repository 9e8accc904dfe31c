"""Opening a project folder and the project-level actions of the editor."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Sequence

from .assets import AssetFile, build_asset_tree
from .classify import FileKind, file_kind, import_subfolder
from .fileops import FileOperationError, import_file
from .notifications import ERROR, SUCCESS, NotificationCenter
from .templates import project_config, scene_document, script_header, script_source

log = logging.getLogger(__name__)

PROJECT_DIRECTORIES = (
    "assets",
    "assets/textures",
    "assets/audio",
    "assets/models",
    "assets/scripts",
    "scenes",
    "builds",
    "config",
)
CONFIG_FILE = "config/project.json"
SCENE_FOLDER = "assets/scenes"
SCENE_EXTENSION = ".ilmeescene"
SCRIPT_FOLDER = "assets/scripts"
HEADER_FOLDER = "assets/scripts/header"
EDITOR_COMMAND = "code"

Launcher = Callable[[Sequence[str]], object]


def _launch(command: Sequence[str]) -> object:
    return subprocess.Popen(list(command))


def _system_opener(path: str) -> list[str]:
    if os.name == "nt":
        return ["explorer", path]
    if sys.platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def _current_date_time() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@dataclass
class ProjectHandler:
    """State of the open project and the actions that change it."""

    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    launcher: Launcher = _launch
    project_path: Path | None = None
    asset_tree: AssetFile | None = None
    is_opened_project: bool = False

    def _require_project(self) -> Path:
        if self.project_path is None:
            raise FileOperationError("No project is open")
        return self.project_path

    def open_project(self, folder: str | os.PathLike[str]) -> Path:
        """Open a folder as a project, creating its layout and default config."""
        self.is_opened_project = True
        root = Path(folder)
        if not root.is_dir():
            raise NotADirectoryError(f"Invalid project folder path: {root}")
        self.project_path = root

        for directory in PROJECT_DIRECTORIES:
            try:
                (root / directory).mkdir(exist_ok=True)
            except OSError as exc:
                log.error("Error creating directory %s: %s", root / directory, exc)

        config = root / CONFIG_FILE
        if config.is_file():
            log.info("Loading project configuration: %s", config)
        else:
            try:
                config.write_text(project_config(root.resolve().name, _current_date_time()))
            except OSError as exc:
                log.error("Cannot write project configuration %s: %s", config, exc)

        self.asset_tree = build_asset_tree(root)
        log.info("Project loaded successfully: %s", root)
        return root

    def new_scene(self, name: str) -> Path:
        """Write an empty scene file named ``name`` and return its path."""
        root = self._require_project()
        folder = root / SCENE_FOLDER
        path = folder / f"{name}{SCENE_EXTENSION}"
        try:
            folder.mkdir(parents=True, exist_ok=True)
            path.write_text(scene_document(name))
        except OSError as exc:
            self.notifications.show("Failed", "Failed to create scene!", ERROR)
            raise FileOperationError(f"Cannot create scene {path}: {exc}") from exc
        self.notifications.show(
            "Scene Created & Loaded", f"Scene {name} was created and loaded.", SUCCESS
        )
        return path

    def new_script(self, name: str) -> tuple[Path, Path]:
        """Write a script and its header from the templates; refuse to overwrite."""
        root = self._require_project()
        script_dir = root / SCRIPT_FOLDER
        header_dir = root / HEADER_FOLDER
        try:
            script_dir.mkdir(parents=True, exist_ok=True)
            header_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileOperationError(f"Error creating scripts directory: {exc}") from exc

        source = script_dir / f"{name}.cpp"
        if source.exists():
            raise FileOperationError(f"Script file already exists: {source}")
        header = header_dir / f"{name}.hpp"
        try:
            source.write_text(script_source(name))
            header.write_text(script_header(name))
        except OSError as exc:
            raise FileOperationError(f"Error creating script file {source}: {exc}") from exc
        log.info("Created script: %s", source)
        log.info("Created header: %s", header)
        return source, header

    def import_files(self, paths: Iterable[str | os.PathLike[str]]) -> list[Path]:
        """Copy files into the asset folder that suits each one's type."""
        root = self._require_project()
        imported: list[Path] = []
        count = 0
        for path in paths:
            count += 1
            target_folder = root / import_subfolder(str(path))
            target_folder.mkdir(parents=True, exist_ok=True)
            try:
                copy = import_file(path, target_folder)
            except FileOperationError as exc:
                self.notifications.show("Import Failed", str(exc), ERROR)
                continue
            self.notifications.show(
                "Import Successful",
                f"Imported: {Path(path).name}\nTo: {target_folder}",
                SUCCESS,
            )
            self.is_opened_project = True
            imported.append(copy)
        if count:
            self.notifications.show("Import Complete", f"Imported {count} file(s)", SUCCESS)
        return imported

    def _run(self, command: list[str]) -> list[str]:
        try:
            self.launcher(command)
        except OSError as exc:
            raise FileOperationError(f"Cannot run {command[0]}: {exc}") from exc
        return command

    def open_in_editor(self, path: str | os.PathLike[str]) -> list[str]:
        """Open a file or folder in the code editor; return the command run."""
        return self._run([EDITOR_COMMAND, str(path)])

    def open_asset(self, node: AssetFile) -> list[str] | None:
        """Open an asset with the tool for its type; None if it has none."""
        kind = file_kind(node.name)
        if kind in (FileKind.CPP, FileKind.HPP):
            target = self.project_path if os.name == "nt" and self.project_path else node.full_path
            return self.open_in_editor(target)
        if kind in (FileKind.VIDEO, FileKind.IMAGE, FileKind.AUDIO):
            return self._run(_system_opener(node.full_path))
        return None


def _print_tree(node: AssetFile, depth: int = 0) -> None:
    suffix = "/" if node.is_directory else ""
    print("  " * depth + node.name + suffix)
    for child in node.children:
        _print_tree(child, depth + 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a project and run the requested actions on it."""
    parser = argparse.ArgumentParser(prog="ilmeeproject", description="Manage a game project folder.")
    parser.add_argument("folder", help="project folder to open")
    parser.add_argument("--new-scene", metavar="NAME", action="append", default=[])
    parser.add_argument("--new-script", metavar="NAME", action="append", default=[])
    parser.add_argument("--import", dest="imports", metavar="FILE", nargs="+", default=[])
    parser.add_argument("--tree", action="store_true", help="print the asset tree")
    args = parser.parse_args(argv)

    handler = ProjectHandler()
    try:
        handler.open_project(args.folder)
        for name in args.new_scene:
            handler.new_scene(name)
        for name in args.new_script:
            source, header = handler.new_script(name)
            print(f"Created script: {source}")
            print(f"Created header: {header}")
        if args.imports:
            handler.import_files(args.imports)
    except (OSError, FileOperationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for note in handler.notifications.notifications:
        print(f"{note.title}: {note.message}")
    if args.tree and handler.project_path is not None:
        _print_tree(build_asset_tree(handler.project_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())