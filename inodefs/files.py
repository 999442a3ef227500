"""File operations: creation, writing, import, moving, deletion and lookup."""

from __future__ import annotations

import time
from pathlib import Path

from .directory import add_entry, find_entry, rename_entry
from .partition import (
    DIRECT_POINTERS,
    ENTRY_SIZE,
    MAX_NAME,
    FileSystemError,
    InodeType,
    Partition,
)


def _now() -> int:
    return int(time.time())


def _file_inode(partition: Partition, inode_number: int):
    if (
        not 0 <= inode_number < partition.num_inodes
        or partition.inodes[inode_number].type != InodeType.FILE
    ):
        raise FileSystemError(f"Erro: I-node {inode_number} não é um arquivo.")
    return partition.inodes[inode_number]


def _release_blocks(partition: Partition, node) -> None:
    for index, block in enumerate(node.direct_blocks):
        if block != -1:
            partition.block_bitmap[block] = False
            node.direct_blocks[index] = -1


def _lookup_file(partition: Partition, inode_dir: int, name: str, where: str = "") -> int:
    number = find_entry(partition, inode_dir, name)
    if number is None:
        raise FileSystemError(f"Erro: Arquivo '{name}' não encontrado{where}.")
    if partition.inodes[number].type != InodeType.FILE:
        raise FileSystemError(f"Erro: '{name}' não é um arquivo.")
    return number


def _drop_entry(partition: Partition, inode_dir: int, name: str) -> None:
    slot = next(
        (e for e in partition.directory_slots(inode_dir) if e.valid and e.name == name),
        None,
    )
    if slot is None:
        raise FileSystemError("Erro: Falha ao remover entrada do diretório.")
    slot.valid = False
    directory = partition.inodes[inode_dir]
    directory.size -= ENTRY_SIZE
    directory.modified = _now()


def create_file(partition: Partition, name: str, parent: int) -> int:
    """Create an empty file under parent and return its i-node."""
    if not name or len(name) > MAX_NAME:
        raise FileSystemError("Erro: Parâmetros inválidos.")
    if (
        not 0 <= parent < partition.num_inodes
        or not partition.inode_bitmap[parent]
        or partition.inodes[parent].type != InodeType.DIRECTORY
    ):
        raise FileSystemError("Erro: Diretório pai inválido.")
    if find_entry(partition, parent, name) is not None:
        raise FileSystemError(f"Erro: Já existe um arquivo com o nome '{name}'.")

    number = partition.find_free_inode()
    if number is None:
        raise FileSystemError("Erro: Nenhum i-node livre disponível.")

    stamp = _now()
    node = partition.inodes[number]
    node.reset()
    node.number = number
    node.type = InodeType.FILE
    node.created = node.modified = node.accessed = stamp
    partition.inode_bitmap[number] = True

    try:
        add_entry(partition, parent, name, number)
    except FileSystemError:
        partition.inode_bitmap[number] = False
        node.reset()
        raise
    return number


def write_file(partition: Partition, inode_number: int, data: bytes) -> None:
    """Replace the content of a file with data."""
    node = _file_inode(partition, inode_number)
    size = len(data)
    if size <= 0:
        raise FileSystemError("Erro: Tamanho de dados inválido.")

    block_size = partition.block_size
    needed = (size + block_size - 1) // block_size
    if needed > DIRECT_POINTERS:
        raise FileSystemError(
            f"Erro: Arquivo muito grande para o sistema atual (máximo {DIRECT_POINTERS} blocos)."
        )

    _release_blocks(partition, node)

    allocated: list[int] = []
    for _ in range(needed):
        block = partition.find_free_block()
        if block is None:
            for index, used in enumerate(allocated):
                partition.block_bitmap[used] = False
                node.direct_blocks[index] = -1
            raise FileSystemError("Erro: Não há blocos livres suficientes.")
        node.direct_blocks[len(allocated)] = block
        partition.block_bitmap[block] = True
        allocated.append(block)

    for index, block in enumerate(allocated):
        chunk = data[index * block_size:(index + 1) * block_size]
        partition.blocks[block][: len(chunk)] = chunk

    stamp = _now()
    node.size = size
    node.modified = node.accessed = stamp


def import_file(partition: Partition, inode_number: int, path: str | Path) -> int:
    """Copy a real file's content into a file; return the number of bytes."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise FileSystemError(f"Erro: Não foi possível abrir o arquivo '{path}'.") from exc
    size = len(data)
    if size <= 0:
        raise FileSystemError("Erro: Arquivo vazio ou erro ao ler tamanho.")
    limit = DIRECT_POINTERS * partition.block_size
    if size > limit:
        raise FileSystemError(
            f"Erro: Arquivo muito grande ({size} bytes). Máximo suportado: {limit} bytes."
        )
    write_file(partition, inode_number, data)
    return size


def _chunks(partition: Partition, node):
    remaining = node.size
    for block in node.direct_blocks:
        if remaining <= 0 or block == -1:
            break
        length = min(remaining, partition.block_size)
        yield bytes(partition.blocks[block][:length])
        remaining -= length


def read_file(partition: Partition, inode_number: int) -> bytes:
    """The content of a file; refreshes its access time."""
    node = _file_inode(partition, inode_number)
    data = b"".join(_chunks(partition, node))
    node.accessed = _now()
    return data


def format_file_content(partition: Partition, inode_number: int) -> str:
    """The file content as printable text, each block cut at its first NUL."""
    node = _file_inode(partition, inode_number)
    if node.size == 0:
        return "Arquivo vazio."
    text = b"".join(chunk.split(b"\0", 1)[0] for chunk in _chunks(partition, node))
    node.accessed = _now()
    return "\n".join(
        [
            f"=== CONTEÚDO DO ARQUIVO (I-node {inode_number}) ===",
            f"Tamanho: {node.size} bytes",
            "Conteúdo:",
            "-" * 40,
            text.decode("utf-8", errors="replace"),
            "-" * 40,
        ]
    )


def rename_file(partition: Partition, inode_dir: int, old_name: str, new_name: str) -> None:
    """Rename a file within its directory."""
    _lookup_file(partition, inode_dir, old_name)
    rename_entry(partition, inode_dir, old_name, new_name)


def move_file(partition: Partition, source_dir: int, name: str, target_dir: int) -> None:
    """Move a file from one directory to another."""
    number = _lookup_file(partition, source_dir, name, " no diretório origem")
    if (
        not 0 <= target_dir < partition.num_inodes
        or partition.inodes[target_dir].type != InodeType.DIRECTORY
    ):
        raise FileSystemError("Erro: Diretório destino inválido.")
    if find_entry(partition, target_dir, name) is not None:
        raise FileSystemError(
            f"Erro: Já existe um arquivo com nome '{name}' no diretório destino."
        )
    add_entry(partition, target_dir, name, number)
    _drop_entry(partition, source_dir, name)


def delete_file(partition: Partition, inode_dir: int, name: str) -> None:
    """Delete a file, freeing its blocks and i-node."""
    number = _lookup_file(partition, inode_dir, name)
    node = partition.inodes[number]
    _release_blocks(partition, node)
    partition.inode_bitmap[number] = False
    node.reset()
    _drop_entry(partition, inode_dir, name)


def find_file_recursive(partition: Partition, inode_dir: int, name: str) -> int | None:
    """Depth-first search for a file by name below inode_dir."""
    if (
        not 0 <= inode_dir < partition.num_inodes
        or partition.inodes[inode_dir].type != InodeType.DIRECTORY
    ):
        return None
    found = find_entry(partition, inode_dir, name)
    if found is not None and partition.inodes[found].type == InodeType.FILE:
        return found
    for entry in partition.directory_slots(inode_dir):
        if entry.valid and partition.inodes[entry.inode].type == InodeType.DIRECTORY:
            result = find_file_recursive(partition, entry.inode, name)
            if result is not None:
                return result
    return None


def file_info(partition: Partition, inode_number: int) -> str:
    """Detailed metadata of a file as printable text."""
    node = _file_inode(partition, inode_number)
    blocks = [block for block in node.direct_blocks if block != -1]
    return "\n".join(
        [
            "=== INFORMAÇÕES DO ARQUIVO ===",
            f"I-node: {node.number}",
            f"Tamanho: {node.size} bytes",
            f"Data de criação: {time.ctime(node.created)}",
            f"Última modificação: {time.ctime(node.modified)}",
            f"Último acesso: {time.ctime(node.accessed)}",
            "Blocos utilizados: " + "".join(f"{block} " for block in blocks),
            f"Número de blocos: {len(blocks)}",
            "==============================",
        ]
    )