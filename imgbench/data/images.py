from __future__ import annotations
import os
from typing import Iterator

def iter_image_files(image_dir: str) -> Iterator[str]:
    """Yields regular files directly inside `image_dir`, in filesystem order.

    Non-recursive. Subdirectories and other non-file entries are skipped; no
    extension filtering is done, so undecodable files surface as errors later.
    """
    if not os.path.exists(image_dir):
        raise FileNotFoundError(f"image_dir not found: {image_dir}")
    if not os.path.isdir(image_dir):
        raise NotADirectoryError(f"image_dir is not a directory: {image_dir}")
    with os.scandir(image_dir) as it:
        for entry in it:
            if entry.is_file():
                yield entry.path
