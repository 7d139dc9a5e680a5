"""File helpers: extension checks and atomic whole-buffer writes"""

import os
import tempfile
from pathlib import Path
from typing import Iterable


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """True when path ends with one of extensions (case-insensitive)."""
    return Path(path).suffix.lower() in {e.lower() for e in extensions}


def save_bytes(data: bytes, path: Path) -> Path:
    """Write data to path through a sibling temp file and an atomic replace.

    On failure the temp file is removed and any existing file at path is left
    untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return path
