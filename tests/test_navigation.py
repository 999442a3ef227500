import pytest

from inodefs.directory import create_directory, find_entry
from inodefs.files import create_file
from inodefs.navigation import (
    MAX_PATH_DEPTH,
    NavigationError,
    Navigator,
    NotADirectoryPathError,
    PathTooDeepError,
    directory_name,
    is_directory_path,
    move_file_to_path,
    path_suggestions,
    resolve_path,
)
from inodefs.partition import FileSystemError, Partition


@pytest.fixture
def tree():
    partition = Partition(32768, 512)
    docs = create_directory(partition, "docs", 0)
    images = create_directory(partition, "images", docs)
    note = create_file(partition, "note.txt", docs)
    top = create_file(partition, "top.txt", 0)
    return partition, {"docs": docs, "images": images, "note": note, "top": top}


def test_resolve_root_and_invalid(tree):
    partition, _ = tree
    assert resolve_path(partition, "/") == 0
    assert resolve_path(partition, "") is None
    assert resolve_path(partition, None) is None
    assert resolve_path(partition, "docs") is None


def test_resolve_nested_and_trailing_slash(tree):
    partition, ids = tree
    assert resolve_path(partition, "/docs") == ids["docs"]
    assert resolve_path(partition, "/docs/images") == ids["images"]
    assert resolve_path(partition, "/docs/images/") == ids["images"]


def test_resolve_file_only_at_end(tree):
    partition, ids = tree
    assert resolve_path(partition, "/docs/note.txt") == ids["note"]
    assert resolve_path(partition, "/top.txt/more") is None
    assert resolve_path(partition, "/missing") is None


def test_is_directory_path(tree):
    partition, _ = tree
    assert is_directory_path(partition, "/docs/images") is True
    assert is_directory_path(partition, "/docs/note.txt") is False
    assert is_directory_path(partition, "/nothing") is False


def test_directory_name(tree):
    partition, ids = tree
    assert directory_name(partition, 0) == "/"
    assert directory_name(partition, ids["images"]) == "images"
    assert directory_name(partition, 9) == "inode_9"


def test_path_suggestions_lists_only_directories(tree):
    partition, ids = tree
    assert path_suggestions(partition, 0, "/") == ["/docs/"]
    assert path_suggestions(partition, ids["docs"], "/docs/") == ["/docs/images/"]


def test_move_file_to_path(tree):
    partition, ids = tree
    move_file_to_path(partition, 0, "top.txt", "/docs/images")
    assert find_entry(partition, ids["images"], "top.txt") == ids["top"]
    assert find_entry(partition, 0, "top.txt") is None


def test_move_file_to_path_errors(tree):
    partition, ids = tree
    with pytest.raises(FileSystemError):
        move_file_to_path(partition, 0, "absent.txt", "/docs")
    with pytest.raises(NavigationError):
        move_file_to_path(partition, 0, "top.txt", "/nowhere")
    with pytest.raises(NotADirectoryPathError):
        move_file_to_path(partition, 0, "top.txt", "/docs/note.txt")
    create_file(partition, "top.txt", ids["docs"])
    with pytest.raises(FileSystemError):
        move_file_to_path(partition, 0, "top.txt", "/docs")
    assert find_entry(partition, 0, "top.txt") == ids["top"]


def test_navigate_down_and_up(tree):
    partition, ids = tree
    nav = Navigator(partition)
    assert nav.current_path() == "/"
    nav.navigate("docs")
    nav.navigate("images")
    assert nav.current == ids["images"]
    assert nav.current_path() == "/docs/images"
    assert nav.depth() == 2
    nav.navigate("..")
    assert nav.current == ids["docs"]
    assert nav.current_path() == "/docs"
    nav.navigate("..")
    nav.navigate("..")
    assert nav.current == 0
    assert nav.depth() == 0


def test_navigate_errors(tree):
    partition, _ = tree
    nav = Navigator(partition)
    with pytest.raises(NavigationError):
        nav.navigate("missing")
    with pytest.raises(NavigationError):
        nav.navigate("top.txt")
    assert nav.current == 0


def test_navigate_depth_limit():
    partition = Partition(128 * 256, 128)
    parent = 0
    for level in range(MAX_PATH_DEPTH):
        parent = create_directory(partition, f"d{level}", parent)
    nav = Navigator(partition)
    for level in range(MAX_PATH_DEPTH - 1):
        nav.navigate(f"d{level}")
    assert nav.depth() == MAX_PATH_DEPTH - 1
    with pytest.raises(PathTooDeepError):
        nav.navigate(f"d{MAX_PATH_DEPTH - 1}")
    assert nav.depth() == MAX_PATH_DEPTH - 1


def test_navigate_to_path(tree):
    partition, ids = tree
    nav = Navigator(partition)
    nav.navigate_to_path("/docs/images/")
    assert nav.current == ids["images"]
    assert nav.current_path() == "/docs/images"
    nav.navigate_to_path("/")
    assert nav.current == 0
    assert nav.current_path() == "/"


def test_navigate_to_path_errors(tree):
    partition, _ = tree
    nav = Navigator(partition)
    with pytest.raises(NotADirectoryPathError):
        nav.navigate_to_path("/docs/note.txt")
    with pytest.raises(NavigationError):
        nav.navigate_to_path("/ghost")
    with pytest.raises(NavigationError):
        nav.navigate_to_path("")
    assert nav.current == 0


def test_go_root_and_breadcrumb(tree):
    partition, _ = tree
    nav = Navigator(partition)
    assert nav.breadcrumb() == "📁 Localização: /"
    nav.navigate_to_path("/docs/images")
    crumb = nav.breadcrumb()
    assert crumb.startswith("📁 Localização: /docs/images (nível 2)")
    assert "'..'" in crumb
    nav.go_root()
    assert nav.current == 0
    assert nav.depth() == 0