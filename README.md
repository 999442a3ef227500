# inodefs

A small, in-memory file system simulator built around i-nodes, fixed-size
blocks and allocation bitmaps. Every file and directory owns an i-node,
each directory keeps its name → i-node entries in one block, and a file uses
up to 12 direct block pointers.

The interactive menus and the messages carried by errors are in Portuguese.

## Installing

```
pip install .
```

## Interactive use

```
inodefs
```

This opens a menu-driven shell (`inodefs.menu.Shell`). Start by initialising a
partition, for example 16384 bytes with 512-byte blocks. The partition size
must be a multiple of the block size. Afterwards the menus let you:

- list, create, rename and delete directories, and move between them by name,
  with `..`, with `/`, or with an absolute path such as `/docs/images`;
- create empty files, import real files from disk, view a file's content and
  details, rename, move (to an absolute path or to a directory i-node number)
  and delete files, and search for a file by name from the root;
- show partition statistics, the table of used i-nodes and the block and
  i-node bitmaps, switch verbose messages on or off, and discard the partition;
- run command scripts, write an example script, and choose whether scripts
  echo each command and whether they ask to stop after a failing line.

## Limits

- A block must hold at least one directory entry (72 bytes), and the partition
  needs at least four blocks. There is one i-node for every four blocks.
- A directory holds at most `block_size // 72` entries.
- A file holds at most 12 blocks of data.
- Names are 1 to 63 characters long.
- The current directory can be at most 49 levels below the root.

## Command scripts

A script is a plain text file with one command per line. Blank lines and lines
starting with `#` are ignored, and arguments after the tenth are dropped.

```
# build a small tree
echo Starting
criar_dir documentos
navegar documentos
criar_arquivo readme.txt
importar notas.txt /tmp/notas.txt
listar
navegar /
info
```

| Command | Arguments | Effect |
|---|---|---|
| `criar_dir` | name | create a directory |
| `criar_arquivo` | name | create an empty file |
| `navegar` | name, `..`, `/` or absolute path | change the current directory |
| `listar` | | list the current directory |
| `importar` | name, real path | create a file and copy a real file into it |
| `renomear` | old, new | rename a file or directory |
| `mover` | file, absolute path | move a file into another directory |
| `apagar` | name | delete a file or an empty directory |
| `info` | | show partition statistics |
| `echo` | text | print the arguments |
| `pausar` | | wait for Enter |

When commands are echoed, the runner waits 0.1 seconds after each one.
At the end it prints how many commands ran, how many failed and the success
rate.

## Library use

```python
from inodefs.partition import Partition
from inodefs.directory import create_directory
from inodefs.files import create_file, write_file, read_file
from inodefs.navigation import Navigator, resolve_path
from inodefs.automation import CommandRunner

part = Partition(16384, 512)
docs = create_directory(part, "docs", 0)
note = create_file(part, "note.txt", docs)
write_file(part, note, b"hello")
assert read_file(part, note) == b"hello"
assert resolve_path(part, "/docs/note.txt") == note

nav = Navigator(part)
nav.navigate("docs")
print(nav.current_path())  # /docs

runner = CommandRunner(nav, show_commands=False, pause_on_error=False)
report = runner.run_lines(["criar_dir sub", "navegar sub", "navegar nowhere"])
print(report.executed, report.errors, report.success_rate())
```

The modules:

- `inodefs.partition`: `Partition`, `Inode`, `DirEntry`, `InodeType`,
  `PartitionStats` and `FileSystemError`.
- `inodefs.directory`: `find_entry`, `add_entry`, `create_directory`,
  `rename_entry`, `remove_directory`.
- `inodefs.files`: `create_file`, `write_file`, `import_file`, `read_file`,
  `format_file_content`, `rename_file`, `move_file`, `delete_file`,
  `find_file_recursive`, `file_info`.
- `inodefs.navigation`: `Navigator`, `resolve_path`, `is_directory_path`,
  `directory_name`, `path_suggestions`, `move_file_to_path`.
- `inodefs.automation`: `parse_command`, `Command`, `CommandRunner`,
  `RunReport`, `write_example_script`.
- `inodefs.menu`: `Shell` and `main`.

Operations that fail raise `inodefs.partition.FileSystemError`. Navigation
failures raise `inodefs.navigation.NavigationError`, or its subclasses
`PathTooDeepError` and `NotADirectoryPathError`. Lookups such as `find_entry`,
`resolve_path` and `find_file_recursive` return `None` when nothing is found.

## What it does not do

- The partition lives only in memory. Nothing is saved to disk, and everything
  is lost when the shell exits or the partition is discarded.
- Files can only be given content by importing a real file (or by calling
  `write_file`). There is no editor and no way to copy a file back out to disk.
- Paths given to `mover` and to path navigation must be absolute. Relative
  paths other than a single name or `..` are not resolved.

## Running the tests

```
pip install .[test]
pytest
```