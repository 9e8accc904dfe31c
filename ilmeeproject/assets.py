"""The project's asset tree: scanning, listing, searching and grid ordering."""

from __future__ import annotations

import os
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator


@dataclass
class AssetFile:
    """A file or folder in the project, with its children when it is a folder."""

    name: str
    full_path: str
    is_directory: bool
    children: list[AssetFile] = field(default_factory=list)
    last_click_time: float = 0.0

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> AssetFile:
        entry = Path(path)
        return cls(entry.name, str(entry), entry.is_dir())

    def walk(self) -> Iterator[AssetFile]:
        """This node and every node below it, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


def _grid_order(item: AssetFile) -> tuple[bool, str]:
    return (not item.is_directory, item.name)


def build_asset_tree(root: str | os.PathLike[str]) -> AssetFile:
    """Tree of everything under ``root``; folders come before files, by name."""
    node = AssetFile.from_path(root)
    if not node.is_directory:
        return node
    node.children = sorted(
        (build_asset_tree(entry) for entry in Path(root).iterdir()),
        key=_grid_order,
    )
    return node


def scan_assets_folder(root: str | os.PathLike[str]) -> dict[str, list[str]]:
    """File names under ``root`` grouped by the name of the folder holding them."""
    groups: dict[str, list[str]] = defaultdict(list)
    for dirpath, _dirnames, filenames in os.walk(root):
        parent = Path(dirpath).name
        for filename in filenames:
            if (Path(dirpath) / filename).is_file():
                groups[parent].append(filename)
    return dict(groups)


def search(node: AssetFile, query: str) -> list[AssetFile]:
    """Nodes whose name contains ``query``, ignoring case, in depth-first order."""
    needle = query.lower()
    return [item for item in node.walk() if needle in item.name.lower()]


def list_directory(path: str | os.PathLike[str]) -> list[AssetFile]:
    """The direct entries of a folder, without their children."""
    folder = Path(path)
    if not folder.is_dir():
        return []
    return [AssetFile.from_path(entry) for entry in folder.iterdir()]


def grid_items(files: Iterable[AssetFile], filter_text: str = "") -> list[AssetFile]:
    """Entries whose name contains ``filter_text``, folders first, then by name."""
    chosen = (f for f in files if not filter_text or filter_text in f.name)
    return sorted(chosen, key=_grid_order)