import pytest

from inodefs.partition import (
    DIRECT_POINTERS,
    ENTRY_SIZE,
    DirEntry,
    FileSystemError,
    Inode,
    InodeType,
    Partition,
)


@pytest.fixture
def part():
    return Partition(8192, 512)


def test_entry_size_is_fixed_record_size():
    tight = Partition(72 * 8, 72)
    assert tight.entries_per_block() == 1
    assert tight.statistics().entry_size == 72
    assert ENTRY_SIZE == 72


def test_geometry_invariants(part):
    assert part.num_blocks * part.block_size == part.size
    assert part.num_inodes == part.num_blocks // 4
    assert len(part.blocks) == part.num_blocks
    assert all(len(block) == 512 for block in part.blocks)
    assert len(part.inodes) == part.num_inodes


@pytest.mark.parametrize(
    "size, block_size",
    [(0, 512), (8192, 0), (-512, 512), (8192, -4), (8000, 512), (640, 64)],
)
def test_invalid_geometry_raises(size, block_size):
    with pytest.raises(FileSystemError):
        Partition(size, block_size)


def test_partition_without_inodes_raises():
    with pytest.raises(FileSystemError):
        Partition(1024, 512)


def test_root_directory_created(part):
    root = part.inodes[0]
    assert root.type == InodeType.DIRECTORY
    assert root.size == 0
    assert root.direct_blocks[0] == 0
    assert part.inode_bitmap[0] is True
    assert part.block_bitmap[0] is True
    assert root.created > 0


def test_find_free_after_root(part):
    assert part.find_free_block() == 1
    assert part.find_free_inode() == 1


def test_find_free_returns_none_when_exhausted(part):
    part.block_bitmap = [True] * part.num_blocks
    part.inode_bitmap = [True] * part.num_inodes
    assert part.find_free_block() is None
    assert part.find_free_inode() is None


def test_create_root_without_free_block_raises(part):
    part.block_bitmap = [True] * part.num_blocks
    with pytest.raises(FileSystemError):
        part.create_root()


def test_entries_per_block(part):
    assert part.entries_per_block() == 512 // ENTRY_SIZE


def test_root_slots_start_invalid(part):
    slots = part.directory_slots(0)
    assert len(slots) == part.entries_per_block()
    assert not any(slot.valid for slot in slots)


@pytest.mark.parametrize("inode", [1, -1, 10_000])
def test_directory_slots_rejects_non_directories(part, inode):
    with pytest.raises(FileSystemError):
        part.directory_slots(inode)


def test_list_directory_returns_valid_entries(part):
    slots = part.directory_slots(0)
    slots[1] = DirEntry(name="docs", inode=0, valid=True)
    slots[2] = DirEntry(name="gone", inode=0, valid=False)
    entries = part.list_directory(0)
    assert [e.name for e in entries] == ["docs"]


def test_list_directory_updates_access_time(part):
    part.inodes[0].accessed = 0
    part.list_directory(0)
    assert part.inodes[0].accessed > 0


def test_list_directory_on_file_raises(part):
    part.inodes[1].type = InodeType.FILE
    part.inode_bitmap[1] = True
    with pytest.raises(FileSystemError):
        part.list_directory(1)


def test_format_directory_contains_entries(part):
    part.directory_slots(0)[0] = DirEntry(name="docs", inode=0, valid=True)
    text = part.format_directory(0)
    row = next(line for line in text.splitlines() if line.startswith("docs"))
    assert "DIR" in row
    assert "Nome" in text.splitlines()[1]


def test_statistics_counts(part):
    stats = part.statistics()
    assert stats.total_blocks == part.num_blocks
    assert stats.free_blocks == part.num_blocks - 1
    assert stats.free_inodes == part.num_inodes - 1
    assert stats.entry_size == ENTRY_SIZE
    assert stats.entries_per_block == part.entries_per_block()
    assert 0 < stats.free_block_percent < 100


def test_format_statistics(part):
    text = part.format_statistics()
    assert f"Blocos totais: {part.num_blocks}" in text
    assert "Tamanho total: 8192 bytes" in text
    assert text.startswith("=== ESTATÍSTICAS DA PARTIÇÃO ===")


def test_inode_reset():
    node = Inode(5, InodeType.FILE, size=30, created=1, modified=2, accessed=3)
    node.direct_blocks[0] = 7
    node.reset()
    assert node.number == 5
    assert node.type == InodeType.FREE
    assert node.size == 0
    assert (node.created, node.modified, node.accessed) == (0, 0, 0)
    assert node.direct_blocks == [-1] * DIRECT_POINTERS