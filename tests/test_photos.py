import io

import pytest

from sglrights.photos import save_photo


def test_save_photo_writes_content(tmp_path):
    name = save_photo(tmp_path, "avatar.png", io.BytesIO(b"image-bytes"))
    assert name.endswith(".png")
    assert (tmp_path / name).read_bytes() == b"image-bytes"


def test_save_photo_uses_last_extension(tmp_path):
    name = save_photo(tmp_path, "archive.tar.gz", io.BytesIO(b"x"))
    assert name.endswith(".gz")
    assert name.count(".") == 1


def test_save_photo_without_dot_uses_whole_name(tmp_path):
    name = save_photo(tmp_path, "picture", io.BytesIO(b"x"))
    assert name.endswith(".picture")


def test_save_photo_names_are_unique(tmp_path):
    names = {save_photo(tmp_path, "a.jpg", io.BytesIO(b"x")) for _ in range(5)}
    assert len(names) == 5
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(names)


def test_save_photo_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_photo(tmp_path / "absent", "a.jpg", io.BytesIO(b"x"))