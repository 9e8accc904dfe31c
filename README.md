# ilmeeproject

Project and asset management for a small game engine editor. It works on
folders and files only and has no graphical interface.

## Installation

```
pip install .
```

Install with the `test` extra (`pip install .[test]`) to run the tests with
`pytest`.

## Command line

```
ilmeeproject PATH [--new-scene NAME] [--new-script NAME] [--import FILE ...] [--tree]
```

`PATH` is opened as a project. Any missing project folders are created:
`assets`, `assets/textures`, `assets/audio`, `assets/models`,
`assets/scripts`, `scenes`, `builds` and `config`. If there is no
`config/project.json`, a default one is written. It holds the project name,
the version `1.0.0` and the creation time.

- `--new-scene NAME` writes an empty scene to
  `assets/scenes/NAME.ilmeescene`. The option can be repeated.
- `--new-script NAME` writes `assets/scripts/NAME.cpp` and
  `assets/scripts/header/NAME.hpp` from templates. The option can be
  repeated, and an existing script is never overwritten.
- `--import FILE ...` copies files into the asset folder that fits their
  extension (see below).
- `--tree` prints the asset tree at the end.

The command prints the notifications collected along the way. If a step
fails, it prints `Error: ...` to standard error and exits with status 1.

## Library

### `ilmeeproject.project`

`ProjectHandler` holds the open project (`project_path`, `asset_tree`) and a
`NotificationCenter`. Its methods:

- `open_project(folder)` creates the layout and the default config, then
  builds the asset tree. It raises `NotADirectoryError` if `folder` is not a
  directory.
- `new_scene(name)` returns the path of the scene file it wrote.
- `new_script(name)` returns the `.cpp` and `.hpp` paths. It raises
  `FileOperationError` if the script already exists.
- `import_files(paths)` copies each file and returns the copies. A file that
  fails to copy is reported as a notification and skipped.
- `open_in_editor(path)` runs `code PATH`.
- `open_asset(node)` opens `.cpp`/`.hpp` files in the editor. On Windows it
  opens the project folder instead. Videos, images and audio go to the
  system opener (`explorer`, `open` or `xdg-open`). For other files it does
  nothing and returns `None`.

Commands are started through the handler's `launcher`, which is
`subprocess.Popen` by default.

```python
from ilmeeproject.project import ProjectHandler
from ilmeeproject.assets import search

handler = ProjectHandler()
handler.open_project("MyGame")
handler.new_scene("Level1")
handler.new_script("Player")
handler.import_files(["/tmp/hero.png", "/tmp/theme.ogg"])

for match in search(handler.asset_tree, "player"):
    print(match.full_path)
```

### `ilmeeproject.assets`

- `AssetFile` has `name`, `full_path`, `is_directory`, `children` and a
  `walk()` method.
- `build_asset_tree(root)` builds the tree, with folders first and then
  names in order.
- `scan_assets_folder(root)` groups file names by the name of the folder
  that holds them.
- `search(node, query)` matches names without regard to case.
- `list_directory(path)` lists the direct entries of a folder.
- `grid_items(files, filter_text)` keeps the entries whose name contains
  `filter_text` and sorts them with folders first, then by name.

### `ilmeeproject.fileops`

- `paste` and `import_file` copy an item. If the name is taken, the copy
  gets a `_copy` suffix; see `copy_destination`.
- `rename_entry` renames an item. A file keeps its extension when the new
  name has none.
- `delete_path` removes a file or a whole folder and returns the number of
  items removed.
- `create_folder` (default name `New Folder`), `create_empty_file`
  (`NewFile.txt`) and `create_script_pair` (`NewScript.cpp`/`.hpp`) create
  new items.

Failures raise `FileOperationError`.

### `ilmeeproject.classify`

- `FileKind` and `file_kind(name)` classify a file by its extension.
- `import_subfolder(path)` gives the import folder for a file:
  - `.cpp`, `.h`, `.hpp` go to `assets/scripts`;
  - images go to `assets/textures`;
  - `.mp3`, `.wav`, `.ogg` go to `assets/audio`;
  - videos go to `assets/video`;
  - anything else goes to `assets`.
- `kind_color(kind)` gives the RGBA colour for a kind.
- `display_name(name)` shortens names longer than 15 characters to 12
  characters followed by `...`.

### `ilmeeproject.watcher`

`FileWatcher(root, interval=1.0, notifications=None)` compares modification
times:

- `snapshot()` records the current state as the baseline.
- `check()` returns a `FileChanges` with `new`, `modified` and `deleted`
  paths, plus a `summary()`.
- `start()` and `stop()` run the checks in a background thread.
- `consume_changes()` returns `True` once after the thread has seen changes.

The watcher can also be used as a context manager.

```python
from ilmeeproject.watcher import FileWatcher

with FileWatcher("MyGame") as watcher:
    ...
    if watcher.consume_changes():
        ...  # rebuild the asset tree
```

### `ilmeeproject.notifications`

`NotificationCenter.show(title, message, color)` queues a notification that
lasts three seconds. `visible(now)` drops expired notifications and returns
the rest with their slot, time left, alpha (fading over the last second) and
progress.

### `ilmeeproject.imaging` and `ilmeeproject.templates`

`imaging` works on packed 8-bit image buffers:

- `calculate_color_variance` computes the variance of all RGB values;
- `is_frame_valid` is true when the RGB values span more than 30;
- `flip_vertically` reverses the order of the rows.

`templates` provides the texts for new files: `script_source`,
`script_header`, `scene_document` and `project_config`.

## What it does not do

- There is no editor window, file browser screen or dialog. Everything is
  done through the functions above or the command line.
- Scenes are created as files but never loaded or rendered.
- Icons and video thumbnails are not generated. Image decoding and textures
  are left to the caller. `imaging` only works on raw pixel buffers.