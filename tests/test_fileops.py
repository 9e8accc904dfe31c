from pathlib import Path

import pytest

from ilmeeproject.fileops import (
    FileOperationError,
    copy_destination,
    create_empty_file,
    create_folder,
    create_script_pair,
    delete_path,
    import_file,
    paste,
    rename_entry,
)
from ilmeeproject.templates import script_header, script_source


@pytest.fixture
def dirs(tmp_path: Path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.mkdir()
    dst.mkdir()
    return src, dst


def test_copy_destination_free_name(dirs):
    src, dst = dirs
    assert copy_destination(src / "a.txt", dst) == dst / "a.txt"


def test_copy_destination_taken_name(dirs):
    src, dst = dirs
    (dst / "a.txt").write_text("old")
    assert copy_destination(src / "a.txt", dst) == dst / "a_copy.txt"


def test_paste_file_and_conflict(dirs):
    src, dst = dirs
    (src / "a.txt").write_text("hello")
    first = paste(src / "a.txt", dst)
    second = paste(src / "a.txt", dst)
    assert first.read_text() == "hello"
    assert second == copy_destination(src / "a.txt", dst).parent / "a_copy.txt"
    assert second.read_text() == "hello"


def test_paste_directory_recursively(dirs):
    src, dst = dirs
    (src / "pack" / "inner").mkdir(parents=True)
    (src / "pack" / "inner" / "f.bin").write_bytes(b"\x01\x02")
    target = paste(src / "pack", dst)
    assert (target / "inner" / "f.bin").read_bytes() == b"\x01\x02"


def test_paste_without_clipboard(dirs):
    with pytest.raises(FileOperationError, match="No item in clipboard!"):
        paste("", dirs[1])


def test_paste_missing_source(dirs):
    src, dst = dirs
    with pytest.raises(FileOperationError):
        paste(src / "ghost.txt", dst)


def test_import_file(dirs):
    src, dst = dirs
    (src / "img.png").write_bytes(b"png")
    target = import_file(src / "img.png", dst)
    assert target == dst / "img.png"
    assert target.read_bytes() == b"png"


def test_import_without_selection(dirs):
    with pytest.raises(FileOperationError, match="No file selected!"):
        import_file(None, dirs[1])


def test_rename_keeps_file_extension(dirs):
    src, _ = dirs
    (src / "old.cpp").write_text("x")
    new = rename_entry(src / "old.cpp", "fresh", is_directory=False)
    assert new == src / "fresh.cpp"
    assert new.read_text() == "x"
    assert not (src / "old.cpp").exists()


def test_rename_with_explicit_extension(dirs):
    src, _ = dirs
    (src / "old.cpp").write_text("x")
    assert rename_entry(src / "old.cpp", "new.hpp", False) == src / "new.hpp"


def test_rename_directory_takes_name_as_given(dirs):
    src, _ = dirs
    (src / "folder").mkdir()
    assert rename_entry(src / "folder", "other", True) == src / "other"
    assert (src / "other").is_dir()


def test_rename_errors(dirs):
    src, _ = dirs
    (src / "a.txt").write_text("")
    (src / "b.txt").write_text("")
    with pytest.raises(FileOperationError, match="Name cannot be empty"):
        rename_entry(src / "a.txt", "", False)
    with pytest.raises(FileOperationError, match="already exists"):
        rename_entry(src / "a.txt", "b", False)


def test_delete_file_and_folder(dirs):
    src, _ = dirs
    (src / "f.txt").write_text("")
    (src / "d" / "e").mkdir(parents=True)
    (src / "d" / "e" / "g.txt").write_text("")
    assert delete_path(src / "f.txt") == 1
    assert delete_path(src / "d") == 3
    assert list(src.iterdir()) == []
    assert delete_path(src / "missing") == 0


def test_create_folder(dirs):
    src, _ = dirs
    folder = create_folder(src)
    assert folder == src / "New Folder"
    assert folder.is_dir()
    with pytest.raises(FileOperationError):
        create_folder(src)


def test_create_empty_file(dirs):
    src, _ = dirs
    path = create_empty_file(src, "notes")
    assert path == src / "notes.txt"
    assert path.read_text() == ""
    assert create_empty_file(src, "") == src / "NewFile.txt"
    with pytest.raises(FileOperationError, match="File already exists."):
        create_empty_file(src, "notes")


def test_create_script_pair(dirs):
    src, _ = dirs
    cpp, hpp = create_script_pair(src, "Enemy")
    assert cpp.read_text() == script_source("Enemy")
    assert hpp.read_text() == script_header("Enemy")
    with pytest.raises(FileOperationError):
        create_script_pair(src, "Enemy")


def test_create_script_pair_default_name(dirs):
    src, _ = dirs
    cpp, hpp = create_script_pair(src, "")
    assert (cpp.name, hpp.name) == ("NewScript.cpp", "NewScript.hpp")