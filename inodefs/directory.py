"""Directory operations: lookup, creation, renaming and removal of entries."""

from __future__ import annotations

import time

from .partition import (
    ENTRY_SIZE,
    MAX_NAME,
    DirEntry,
    FileSystemError,
    InodeType,
    Partition,
)


def _now() -> int:
    return int(time.time())


def _check_name(name: str) -> None:
    if not name or len(name) > MAX_NAME:
        raise FileSystemError("Erro: Parâmetros inválidos.")


def _check_parent(partition: Partition, parent: int) -> None:
    if (
        not 0 <= parent < partition.num_inodes
        or not partition.inode_bitmap[parent]
        or partition.inodes[parent].type != InodeType.DIRECTORY
    ):
        raise FileSystemError("Erro: I-node pai inválido ou não é um diretório.")


def find_entry(partition: Partition, inode_dir: int, name: str) -> int | None:
    """I-node number bound to name in the directory, or None."""
    try:
        slots = partition.directory_slots(inode_dir)
    except FileSystemError:
        return None
    return next((e.inode for e in slots if e.valid and e.name == name), None)


def add_entry(partition: Partition, inode_dir: int, name: str, inode_number: int) -> None:
    """Bind name to an i-node in the first free slot of the directory."""
    slots = partition.directory_slots(inode_dir)
    slot = next((e for e in slots if not e.valid), None)
    if slot is None:
        raise FileSystemError(
            f"Erro: Diretório cheio (máximo {partition.entries_per_block()} entradas por bloco)."
        )
    slot.name = name
    slot.inode = inode_number
    slot.valid = True
    directory = partition.inodes[inode_dir]
    directory.size += ENTRY_SIZE
    directory.modified = _now()


def create_directory(partition: Partition, name: str, parent: int) -> int:
    """Create an empty directory under parent and return its i-node."""
    _check_name(name)
    _check_parent(partition, parent)
    if find_entry(partition, parent, name) is not None:
        raise FileSystemError(f"Erro: Já existe um arquivo/diretório com o nome '{name}'.")

    number = partition.find_free_inode()
    if number is None:
        raise FileSystemError("Erro: Nenhum i-node livre disponível.")
    block = partition.find_free_block()
    if block is None:
        raise FileSystemError("Erro: Nenhum bloco livre disponível.")

    stamp = _now()
    node = partition.inodes[number]
    node.reset()
    node.number = number
    node.type = InodeType.DIRECTORY
    node.created = node.modified = node.accessed = stamp
    node.direct_blocks[0] = block

    partition.inode_bitmap[number] = True
    partition.block_bitmap[block] = True
    partition.blocks[block][:] = bytes(partition.block_size)
    partition.directory_blocks[block] = [
        DirEntry() for _ in range(partition.entries_per_block())
    ]

    try:
        add_entry(partition, parent, name, number)
    except FileSystemError:
        partition.inode_bitmap[number] = False
        partition.block_bitmap[block] = False
        node.reset()
        raise
    return number


def rename_entry(partition: Partition, inode_dir: int, old_name: str, new_name: str) -> None:
    """Rename an entry of the directory in place."""
    if len(new_name) > MAX_NAME:
        raise FileSystemError("Erro: Parâmetros inválidos para renomear.")
    try:
        slots = partition.directory_slots(inode_dir)
    except FileSystemError:
        raise FileSystemError("Erro: I-node fornecido não é um diretório.") from None

    entry = next((e for e in slots if e.valid and e.name == old_name), None)
    if entry is None:
        raise FileSystemError(f"Erro: Entrada '{old_name}' não encontrada para renomear.")
    if find_entry(partition, inode_dir, new_name) is not None:
        raise FileSystemError(f"Erro: Já existe uma entrada com o novo nome '{new_name}'.")
    entry.name = new_name
    partition.inodes[inode_dir].modified = _now()


def remove_directory(partition: Partition, parent: int, name: str) -> None:
    """Remove an empty directory from parent, freeing its i-node and block."""
    target = find_entry(partition, parent, name)
    if target is None or partition.inodes[target].type != InodeType.DIRECTORY:
        raise FileSystemError(f"Erro: Diretório '{name}' não encontrado ou não é diretório.")
    if any(entry.valid for entry in partition.directory_slots(target)):
        raise FileSystemError(f"Erro: Diretório '{name}' não está vazio.")

    node = partition.inodes[target]
    block = node.direct_blocks[0]
    partition.inode_bitmap[target] = False
    if block != -1:
        partition.block_bitmap[block] = False
    node.reset()

    slot = next(
        (e for e in partition.directory_slots(parent) if e.valid and e.name == name), None
    )
    if slot is None:
        raise FileSystemError(f"Erro: Entrada '{name}' não encontrada no diretório pai.")
    slot.valid = False
    directory = partition.inodes[parent]
    directory.size -= ENTRY_SIZE
    directory.modified = _now()