import os

import pytest

from flattener.traversal import iter_files


def _touch(path, text="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _rel_names(root):
    return sorted(e.path.relative_to(root).as_posix() for e in iter_files(root))


def test_prunes_hidden_and_ignored_directories(tmp_path):
    root = tmp_path / "proj"
    _touch(root / "src" / "main.py")
    _touch(root / ".git" / "config")
    _touch(root / ".idea" / "workspace.xml")
    _touch(root / "node_modules" / "pkg" / "index.js")
    _touch(root / "src" / "build" / "gen.py")
    _touch(root / ".github" / "workflows" / "ci.yml")

    assert _rel_names(root) == [".github/workflows/ci.yml", "src/main.py"]


def test_drops_ignored_file_names(tmp_path):
    root = tmp_path / "proj"
    _touch(root / "Cargo.lock")
    _touch(root / "gradlew")
    _touch(root / "lib.rs")

    assert _rel_names(root) == ["lib.rs"]


def test_yields_only_files_with_metadata(tmp_path):
    root = tmp_path / "proj"
    _touch(root / "pkg" / "Mod.PY", "abc")
    (root / "empty_dir").mkdir()

    entries = list(iter_files(root))
    assert len(entries) == 1
    entry = entries[0]
    assert entry.kind == "file"
    assert entry.size == 3
    assert entry.extension == "PY"


def test_dotfile_and_extensionless_entries(tmp_path):
    root = tmp_path / "proj"
    _touch(root / ".bashrc")
    _touch(root / "README")

    exts = {e.name: e.extension for e in iter_files(root)}
    assert exts == {".bashrc": "", "README": ""}


def test_is_lazy(tmp_path):
    root = tmp_path / "proj"
    _touch(root / "a.txt")
    gen = iter_files(root)
    assert next(gen).name == "a.txt"


def test_single_file_root(tmp_path):
    f = _touch(tmp_path / "one.py")
    assert [e.path for e in iter_files(f)] == [f]


def test_ignored_roots_yield_nothing(tmp_path):
    hidden = tmp_path / ".cache"
    _touch(hidden / "a.txt")
    lock = _touch(tmp_path / "yarn.lock")

    assert list(iter_files(hidden)) == []
    assert list(iter_files(lock)) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinked_directories_are_not_followed(tmp_path):
    outside = tmp_path / "outside"
    _touch(outside / "secret.txt")
    root = tmp_path / "proj"
    _touch(root / "a.txt")
    os.symlink(outside, root / "link", target_is_directory=True)

    assert _rel_names(root) == ["a.txt"]


def test_walk_errors_are_skipped(tmp_path, monkeypatch):
    root = tmp_path / "proj"
    _touch(root / "a.txt")
    _touch(root / "locked" / "secret.txt")
    _touch(root / "open" / "b.txt")
    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    assert _rel_names(root) == ["a.txt", "open/b.txt"]
