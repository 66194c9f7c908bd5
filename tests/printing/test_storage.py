from pathlib import Path

import pytest

from printing.config import Settings
from printing.errors import ContentNotFoundError
from printing.storage import Storage


def test_read_returns_bytes(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "a.pdf").write_bytes(b"data")

    storage = Storage(disks={"local": tmp_path})

    assert storage.read("local", "docs/a.pdf") == b"data"


def test_unknown_disk(tmp_path):
    storage = Storage(disks={"local": tmp_path})

    with pytest.raises(ContentNotFoundError, match="Unknown storage disk"):
        storage.read("s3", "a.pdf")


def test_missing_file(tmp_path):
    storage = Storage(disks={"local": tmp_path})

    with pytest.raises(ContentNotFoundError, match="does not exist"):
        storage.read("local", "a.pdf")


def test_directory_is_not_content(tmp_path):
    (tmp_path / "folder").mkdir()
    storage = Storage(disks={"local": tmp_path})

    with pytest.raises(ContentNotFoundError):
        storage.read("local", "folder")


def test_path_cannot_escape_disk(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (tmp_path / "secret.txt").write_bytes(b"nope")

    storage = Storage(disks={"local": root})

    with pytest.raises(ContentNotFoundError, match="escapes"):
        storage.read("local", "../secret.txt")


def test_storage_from_settings():
    storage = Storage.from_settings(Settings(storage_disks={"local": "/srv/print", "labels": "/srv/labels"}))

    assert storage.disks == {"local": Path("/srv/print"), "labels": Path("/srv/labels")}
