from pathlib import Path

import pytest

from ilmeeproject.assets import (
    AssetFile,
    build_asset_tree,
    grid_items,
    list_directory,
    scan_assets_folder,
    search,
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "textures").mkdir()
    (tmp_path / "scripts").mkdir()
    (tmp_path / "textures" / "Hero.png").write_bytes(b"x")
    (tmp_path / "textures" / "tree.png").write_bytes(b"x")
    (tmp_path / "scripts" / "Player.cpp").write_text("")
    (tmp_path / "readme.txt").write_text("")
    return tmp_path


def test_tree_puts_folders_first(project):
    tree = build_asset_tree(project)
    assert tree.is_directory
    assert [c.name for c in tree.children] == ["scripts", "textures", "readme.txt"]
    textures = tree.children[1]
    assert [c.name for c in textures.children] == ["Hero.png", "tree.png"]
    assert textures.children[0].full_path == str(project / "textures" / "Hero.png")


def test_tree_of_a_file_has_no_children(project):
    node = build_asset_tree(project / "readme.txt")
    assert not node.is_directory
    assert node.children == []


def test_scan_groups_by_parent_folder(project):
    groups = scan_assets_folder(project)
    assert sorted(groups["textures"]) == ["Hero.png", "tree.png"]
    assert groups["scripts"] == ["Player.cpp"]
    assert groups[project.name] == ["readme.txt"]


def test_search_ignores_case(project):
    tree = build_asset_tree(project)
    names = [n.name for n in search(tree, "HERO")]
    assert names == ["Hero.png"]


def test_search_includes_folders_and_root(project):
    tree = build_asset_tree(project)
    names = {n.name for n in search(tree, "")}
    assert names == {project.name, "scripts", "textures", "Hero.png", "tree.png",
                     "Player.cpp", "readme.txt"}


def test_list_directory_is_flat(project):
    entries = list_directory(project)
    assert {e.name for e in entries} == {"scripts", "textures", "readme.txt"}
    assert all(e.children == [] for e in entries)


def test_list_directory_of_missing_folder(tmp_path):
    assert list_directory(tmp_path / "missing") == []


def test_grid_items_filters_case_sensitively_and_sorts():
    files = [
        AssetFile("b.png", "/p/b.png", False),
        AssetFile("a.png", "/p/a.png", False),
        AssetFile("zdir", "/p/zdir", True),
        AssetFile("B.txt", "/p/B.txt", False),
    ]
    assert [f.name for f in grid_items(files)] == ["zdir", "B.txt", "a.png", "b.png"]
    assert [f.name for f in grid_items(files, "b")] == ["b.png"]