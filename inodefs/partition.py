"""Partition layout: i-nodes, data blocks and the allocation bitmaps."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field

DIRECT_POINTERS = 12
MAX_NAME = 63
# Name buffer (MAX_NAME + terminator) followed by two 32-bit integers.
ENTRY_SIZE = MAX_NAME + 1 + 4 + 4
BLOCKS_PER_INODE = 4


class FileSystemError(Exception):
    """Raised when an operation on the simulated file system fails."""


class InodeType(enum.IntEnum):
    FREE = -1
    FILE = 0
    DIRECTORY = 1


def _now() -> int:
    return int(time.time())


@dataclass
class Inode:
    """Metadata of one file or directory."""

    number: int
    type: InodeType = InodeType.FREE
    size: int = 0
    created: int = 0
    modified: int = 0
    accessed: int = 0
    direct_blocks: list[int] = field(default_factory=lambda: [-1] * DIRECT_POINTERS)

    def reset(self) -> None:
        """Return the i-node to the free state, keeping its number."""
        self.type = InodeType.FREE
        self.size = 0
        self.created = 0
        self.modified = 0
        self.accessed = 0
        self.direct_blocks = [-1] * DIRECT_POINTERS


@dataclass
class DirEntry:
    """One slot of a directory block mapping a name to an i-node."""

    name: str = ""
    inode: int = 0
    valid: bool = False


@dataclass(frozen=True)
class PartitionStats:
    size: int
    block_size: int
    total_blocks: int
    free_blocks: int
    total_inodes: int
    free_inodes: int
    entry_size: int
    entries_per_block: int

    @property
    def free_block_percent(self) -> float:
        return self.free_blocks / self.total_blocks * 100

    @property
    def free_inode_percent(self) -> float:
        return self.free_inodes / self.total_inodes * 100


class Partition:
    """An in-memory partition divided into fixed-size blocks."""

    def __init__(self, size: int, block_size: int) -> None:
        if size <= 0 or block_size <= 0 or size % block_size != 0:
            raise FileSystemError("Erro: Tamanho inválido da partição ou do bloco.")
        if block_size < ENTRY_SIZE:
            raise FileSystemError(
                f"Erro: Tamanho do bloco ({block_size}) é menor que uma entrada "
                f"de diretório ({ENTRY_SIZE} bytes)."
            )
        self.size = size
        self.block_size = block_size
        self.num_blocks = size // block_size
        self.num_inodes = self.num_blocks // BLOCKS_PER_INODE
        if self.num_inodes == 0:
            raise FileSystemError("Erro: Partição pequena demais para conter i-nodes.")

        self.block_bitmap = [False] * self.num_blocks
        self.inode_bitmap = [False] * self.num_inodes
        self.inodes = [Inode(number) for number in range(self.num_inodes)]
        self.blocks = [bytearray(block_size) for _ in range(self.num_blocks)]
        self.directory_blocks: dict[int, list[DirEntry]] = {}
        self.root_inode = 0
        self.create_root()

    def find_free_inode(self) -> int | None:
        """Lowest free i-node number, or None when all are in use."""
        return next((i for i, used in enumerate(self.inode_bitmap) if not used), None)

    def find_free_block(self) -> int | None:
        """Lowest free block number, or None when all are in use."""
        return next((i for i, used in enumerate(self.block_bitmap) if not used), None)

    def create_root(self) -> None:
        """Set up i-node 0 as the empty root directory."""
        block = self.find_free_block()
        if block is None:
            raise FileSystemError("Erro: Nenhum bloco livre para diretório raiz.")
        stamp = _now()
        root = self.inodes[0]
        root.number = 0
        root.type = InodeType.DIRECTORY
        root.size = 0
        root.created = root.modified = root.accessed = stamp
        root.direct_blocks[0] = block
        self.inode_bitmap[0] = True
        self.block_bitmap[block] = True
        self.blocks[block][:] = bytes(self.block_size)
        self.directory_blocks[block] = [DirEntry() for _ in range(self.entries_per_block())]

    def entries_per_block(self) -> int:
        return self.block_size // ENTRY_SIZE

    def directory_slots(self, inode_dir: int) -> list[DirEntry]:
        """All entry slots, used or not, of a directory's block."""
        if not 0 <= inode_dir < self.num_inodes or self.inodes[inode_dir].type != InodeType.DIRECTORY:
            raise FileSystemError(f"Erro: I-node {inode_dir} não é um diretório.")
        block = self.inodes[inode_dir].direct_blocks[0]
        if block == -1:
            return []
        return self.directory_blocks.setdefault(
            block, [DirEntry() for _ in range(self.entries_per_block())]
        )

    def list_directory(self, inode_dir: int) -> list[DirEntry]:
        """Valid entries of a directory; refreshes its access time."""
        entries = [entry for entry in self.directory_slots(inode_dir) if entry.valid]
        self.inodes[inode_dir].accessed = _now()
        return entries

    def format_directory(self, inode_dir: int) -> str:
        """The directory listing as a printable table."""
        entries = self.list_directory(inode_dir)
        lines = [
            f"Conteúdo do diretório (i-node {inode_dir}):",
            f"{'Nome':<20} {'Tipo':<8} {'Tamanho':<12} {'Última Modificação':<20}",
            "-" * 60,
        ]
        if self.inodes[inode_dir].direct_blocks[0] == -1:
            lines.append("Diretório vazio.")
            return "\n".join(lines)
        for entry in entries:
            node = self.inodes[entry.inode]
            kind = "DIR" if node.type == InodeType.DIRECTORY else "FILE"
            stamp = time.ctime(node.modified)
            lines.append(f"{entry.name:<20} {kind:<8} {node.size:<12} {stamp:<20}")
        return "\n".join(lines)

    def statistics(self) -> PartitionStats:
        return PartitionStats(
            size=self.size,
            block_size=self.block_size,
            total_blocks=self.num_blocks,
            free_blocks=self.block_bitmap.count(False),
            total_inodes=self.num_inodes,
            free_inodes=self.inode_bitmap.count(False),
            entry_size=ENTRY_SIZE,
            entries_per_block=self.entries_per_block(),
        )

    def format_statistics(self) -> str:
        stats = self.statistics()
        return "\n".join(
            [
                "=== ESTATÍSTICAS DA PARTIÇÃO ===",
                f"Tamanho total: {stats.size} bytes",
                f"Tamanho do bloco: {stats.block_size} bytes",
                f"Blocos totais: {stats.total_blocks}",
                f"Blocos livres: {stats.free_blocks} ({stats.free_block_percent:.1f}%)",
                f"I-nodes totais: {stats.total_inodes}",
                f"I-nodes livres: {stats.free_inodes} ({stats.free_inode_percent:.1f}%)",
                f"Tamanho da entrada: {stats.entry_size} bytes",
                f"Entradas por bloco: {stats.entries_per_block}",
                "================================",
            ]
        )