"""Storing uploaded photos under unique names."""

from __future__ import annotations

import os
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO


def save_photo(directory: str | os.PathLike[str], filename: str, stream: BinaryIO) -> str:
    """Copy the upload into the directory and return the stored file name.

    The stored name is a fresh UUID followed by the extension of the
    original file name.
    """
    extension = filename.split(".")[-1]
    stored_name = f"{uuid.uuid4()}.{extension}"
    with open(Path(directory) / stored_name, "wb") as target:
        shutil.copyfileobj(stream, target)
    return stored_name