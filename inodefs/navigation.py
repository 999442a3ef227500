"""Path resolution and the current-directory state of an interactive session."""

from __future__ import annotations

from dataclasses import dataclass

from .directory import find_entry
from .files import _lookup_file, move_file
from .partition import FileSystemError, InodeType, Partition

MAX_PATH_DEPTH = 50


class NavigationError(FileSystemError):
    """Raised when a directory or path cannot be reached."""


class PathTooDeepError(NavigationError):
    """Raised when entering a directory would exceed the path depth limit."""


class NotADirectoryPathError(NavigationError):
    """Raised when a path resolves to something other than a directory."""


@dataclass
class _Level:
    inode: int
    name: str


def _components(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def directory_name(partition: Partition, inode_number: int) -> str:
    """Name under which a directory i-node is referenced, or a fallback label."""
    if inode_number == 0:
        return "/"
    for number, node in enumerate(partition.inodes):
        if not partition.inode_bitmap[number] or node.type != InodeType.DIRECTORY:
            continue
        for entry in partition.directory_slots(number):
            if entry.inode == inode_number and entry.name:
                return entry.name
    return f"inode_{inode_number}"


def resolve_path(partition: Partition, path: str | None) -> int | None:
    """I-node of an absolute path, or None when it does not exist."""
    if not path:
        return None
    if path == "/":
        return 0
    if not path.startswith("/"):
        return None
    parts = _components(path)
    current = 0
    for position, part in enumerate(parts):
        found = find_entry(partition, current, part)
        if found is None:
            return None
        if partition.inodes[found].type != InodeType.DIRECTORY:
            if position + 1 < len(parts):
                return None
            return found
        current = found
    return current


def is_directory_path(partition: Partition, path: str | None) -> bool:
    """True when the path exists and names a directory."""
    number = resolve_path(partition, path)
    if number is None:
        return False
    return partition.inodes[number].type == InodeType.DIRECTORY


def path_suggestions(partition: Partition, inode_base: int, prefix: str) -> list[str]:
    """Subdirectories of inode_base written as prefix + name + '/'."""
    try:
        slots = partition.directory_slots(inode_base)
    except FileSystemError:
        return []
    return [
        f"{prefix}{entry.name}/"
        for entry in slots
        if entry.inode != -1
        and entry.name
        and partition.inodes[entry.inode].type == InodeType.DIRECTORY
    ]


def move_file_to_path(partition: Partition, source_dir: int, name: str, destination: str) -> None:
    """Move a file from source_dir into the directory at an absolute path."""
    _lookup_file(partition, source_dir, name, " no diretório atual")
    target = resolve_path(partition, destination)
    if target is None:
        raise NavigationError(f"Caminho de destino '{destination}' não encontrado.")
    if partition.inodes[target].type != InodeType.DIRECTORY:
        raise NotADirectoryPathError(f"O destino '{destination}' não é um diretório.")
    if find_entry(partition, target, name) is not None:
        raise FileSystemError(f"Já existe um arquivo com o nome '{name}' no destino.")
    move_file(partition, source_dir, name, target)


class Navigator:
    """Tracks the current directory and the path that led to it."""

    def __init__(self, partition: Partition) -> None:
        self.partition = partition
        self.current = 0
        self._levels: list[_Level] = []

    def current_path(self) -> str:
        if not self._levels:
            return "/"
        return "".join(f"/{level.name}" for level in self._levels)

    def depth(self) -> int:
        return len(self._levels)

    def navigate(self, name: str) -> None:
        """Enter a subdirectory of the current one, or go up with '..'."""
        if name == "..":
            if self._levels:
                self._levels.pop()
            self.current = self._levels[-1].inode if self._levels else 0
            return
        target = find_entry(self.partition, self.current, name)
        if target is None or self.partition.inodes[target].type != InodeType.DIRECTORY:
            raise NavigationError(f"Diretório '{name}' não encontrado.")
        if len(self._levels) >= MAX_PATH_DEPTH - 1:
            raise PathTooDeepError(f"Caminho muito profundo (máximo {MAX_PATH_DEPTH} níveis).")
        self._levels.append(_Level(target, name))
        self.current = target

    def go_root(self) -> None:
        self._levels.clear()
        self.current = 0

    def navigate_to_path(self, path: str) -> None:
        """Make the directory at an absolute path the current one."""
        if not path:
            raise NavigationError("Caminho inválido.")
        target = resolve_path(self.partition, path)
        if target is None:
            raise NavigationError(f"Caminho '{path}' não encontrado.")
        if self.partition.inodes[target].type != InodeType.DIRECTORY:
            raise NotADirectoryPathError(f"'{path}' não é um diretório.")
        self.go_root()
        for part in _components(path):
            self.navigate(part)

    def breadcrumb(self) -> str:
        line = f"📁 Localização: {self.current_path()}"
        if self._levels:
            line += f" (nível {len(self._levels)})"
        if len(self._levels) > 1:
            line += "\n💡 Dica: Use '..' para voltar ou '/' para ir à raiz"
        return line