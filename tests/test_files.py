import pytest

from inodefs.directory import create_directory, find_entry
from inodefs.files import (
    create_file,
    delete_file,
    file_info,
    find_file_recursive,
    format_file_content,
    import_file,
    move_file,
    read_file,
    rename_file,
    write_file,
)
from inodefs.partition import DIRECT_POINTERS, FileSystemError, InodeType, Partition


@pytest.fixture
def part():
    return Partition(65536, 512)


def test_create_file_registers_entry(part):
    number = create_file(part, "a.txt", 0)
    assert find_entry(part, 0, "a.txt") == number
    assert part.inodes[number].type == InodeType.FILE
    assert part.inodes[number].size == 0
    assert part.inode_bitmap[number]


def test_create_file_duplicate_raises(part):
    create_file(part, "a.txt", 0)
    with pytest.raises(FileSystemError):
        create_file(part, "a.txt", 0)


@pytest.mark.parametrize("name", ["", "x" * 64])
def test_create_file_bad_name(part, name):
    with pytest.raises(FileSystemError):
        create_file(part, name, 0)


def test_create_file_parent_must_be_directory(part):
    number = create_file(part, "a.txt", 0)
    with pytest.raises(FileSystemError):
        create_file(part, "b.txt", number)


def test_create_file_runs_out_of_inodes():
    small = Partition(8192, 512)
    for index in range(small.num_inodes - 1):
        create_file(small, f"f{index}", 0)
    with pytest.raises(FileSystemError):
        create_file(small, "extra", 0)


def test_write_read_round_trip_multiblock(part):
    number = create_file(part, "big", 0)
    data = bytes(range(256)) * 5
    write_file(part, number, data)
    assert read_file(part, number) == data
    assert part.inodes[number].size == len(data)
    used = [b for b in part.inodes[number].direct_blocks if b != -1]
    assert len(used) == 3


def test_write_empty_raises(part):
    number = create_file(part, "f", 0)
    with pytest.raises(FileSystemError):
        write_file(part, number, b"")


def test_write_too_large_raises(part):
    number = create_file(part, "f", 0)
    with pytest.raises(FileSystemError):
        write_file(part, number, b"x" * (DIRECT_POINTERS * part.block_size + 1))


def test_write_to_directory_raises(part):
    number = create_directory(part, "d", 0)
    with pytest.raises(FileSystemError):
        write_file(part, number, b"data")


def test_rewrite_frees_old_blocks(part):
    number = create_file(part, "f", 0)
    before = part.statistics().free_blocks
    write_file(part, number, b"y" * 2000)
    write_file(part, number, b"short")
    assert part.statistics().free_blocks == before - 1
    assert read_file(part, number) == b"short"


def test_write_without_space_rolls_back():
    small = Partition(8192, 512)
    first = create_file(small, "a", 0)
    write_file(small, first, b"a" * (12 * 512))
    second = create_file(small, "b", 0)
    free_before = small.statistics().free_blocks
    with pytest.raises(FileSystemError):
        write_file(small, second, b"b" * (12 * 512))
    assert small.statistics().free_blocks == free_before
    assert read_file(small, first) == b"a" * (12 * 512)


def test_import_file_round_trip(part, tmp_path):
    source = tmp_path / "in.bin"
    source.write_bytes(b"hello world\n" * 50)
    number = create_file(part, "in", 0)
    assert import_file(part, number, source) == 600
    assert read_file(part, number) == source.read_bytes()


def test_import_missing_file_raises(part, tmp_path):
    number = create_file(part, "in", 0)
    with pytest.raises(FileSystemError):
        import_file(part, number, tmp_path / "missing")


def test_import_empty_file_raises(part, tmp_path):
    source = tmp_path / "empty"
    source.write_bytes(b"")
    number = create_file(part, "in", 0)
    with pytest.raises(FileSystemError):
        import_file(part, number, source)


def test_import_too_large_raises(part, tmp_path):
    source = tmp_path / "big"
    source.write_bytes(b"z" * (DIRECT_POINTERS * part.block_size + 1))
    number = create_file(part, "in", 0)
    with pytest.raises(FileSystemError):
        import_file(part, number, source)


def test_format_file_content(part):
    number = create_file(part, "f", 0)
    assert format_file_content(part, number) == "Arquivo vazio."
    write_file(part, number, b"conteudo de teste")
    text = format_file_content(part, number)
    assert "conteudo de teste" in text
    assert f"I-node {number}" in text


def test_rename_file(part):
    number = create_file(part, "old", 0)
    rename_file(part, 0, "old", "new")
    assert find_entry(part, 0, "new") == number
    assert find_entry(part, 0, "old") is None


def test_rename_file_errors(part):
    create_directory(part, "d", 0)
    with pytest.raises(FileSystemError):
        rename_file(part, 0, "missing", "x")
    with pytest.raises(FileSystemError):
        rename_file(part, 0, "d", "e")


def test_move_file(part):
    target = create_directory(part, "d", 0)
    number = create_file(part, "f", 0)
    root_size = part.inodes[0].size
    move_file(part, 0, "f", target)
    assert find_entry(part, target, "f") == number
    assert find_entry(part, 0, "f") is None
    assert part.inodes[0].size == root_size - (part.inodes[target].size)


def test_move_file_errors(part):
    target = create_directory(part, "d", 0)
    other = create_file(part, "g", 0)
    create_file(part, "f", 0)
    create_file(part, "f", target)
    with pytest.raises(FileSystemError):
        move_file(part, 0, "f", target)
    with pytest.raises(FileSystemError):
        move_file(part, 0, "f", other)
    with pytest.raises(FileSystemError):
        move_file(part, 0, "missing", target)


def test_delete_file_restores_resources(part):
    before = part.statistics()
    number = create_file(part, "f", 0)
    write_file(part, number, b"q" * 1500)
    delete_file(part, 0, "f")
    after = part.statistics()
    assert after.free_blocks == before.free_blocks
    assert after.free_inodes == before.free_inodes
    assert find_entry(part, 0, "f") is None
    assert part.inodes[number].type == InodeType.FREE


def test_delete_directory_with_file_function_raises(part):
    create_directory(part, "d", 0)
    with pytest.raises(FileSystemError):
        delete_file(part, 0, "d")


def test_find_file_recursive(part):
    a = create_directory(part, "a", 0)
    b = create_directory(part, "b", a)
    number = create_file(part, "deep.txt", b)
    assert find_file_recursive(part, 0, "deep.txt") == number
    assert find_file_recursive(part, 0, "nope") is None
    assert find_file_recursive(part, 0, "b") is None


def test_file_info(part):
    number = create_file(part, "f", 0)
    write_file(part, number, b"w" * 700)
    blocks = [b for b in part.inodes[number].direct_blocks if b != -1]
    text = file_info(part, number)
    assert f"I-node: {number}" in text
    assert "Tamanho: 700 bytes" in text
    assert f"Número de blocos: {len(blocks)}" in text
    with pytest.raises(FileSystemError):
        file_info(part, 0)