from pathlib import Path

import pytest

from flattener.classifier import is_excluded_entry, is_hidden_or_ignored
from flattener.models import FileSystemEntry


@pytest.mark.parametrize("name", [".git", ".cache", ".hidden", ".venv", ".DS_Store"])
def test_hidden_directories_are_excluded(name):
    assert is_hidden_or_ignored(name, is_dir=True)


@pytest.mark.parametrize("name", [".github", ".", "src", "Node_Modules"])
def test_directories_that_are_walked(name):
    assert not is_hidden_or_ignored(name, is_dir=True)


@pytest.mark.parametrize("name", ["node_modules", "build", "target", "__pycache__", "out"])
def test_ignored_directory_names(name):
    assert is_hidden_or_ignored(name, is_dir=True)


def test_file_names_match_case_insensitively():
    assert is_hidden_or_ignored("Cargo.lock", is_dir=False)
    assert is_hidden_or_ignored("GRADLEW", is_dir=False)
    assert not is_hidden_or_ignored("main.rs", is_dir=False)


def test_hidden_rule_does_not_apply_to_files():
    assert not is_hidden_or_ignored(".env", is_dir=False)
    assert not is_hidden_or_ignored(".gitignore", is_dir=False)


def test_directory_table_does_not_apply_to_files():
    assert not is_hidden_or_ignored("build", is_dir=False)


def test_extension_is_not_checked_here():
    assert not is_hidden_or_ignored("photo.png", is_dir=False)


def test_entry_wrapper():
    assert is_excluded_entry(FileSystemEntry(path=Path("/tmp/.git"), kind="directory"))
    assert not is_excluded_entry(FileSystemEntry(path=Path("/tmp/.git"), kind="file"))
