"""File utilities for safe file operations."""

import os
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(file_path: Union[str, Path], content: str) -> None:
    """Write content to a file atomically.

    The content goes to a temporary file in the target's directory first and is
    then renamed over the target, so readers of the injury file never see a
    partially written document.

    Args:
        file_path: Path to the target file
        content: Content to write to the file
    """
    file_path = Path(file_path).expanduser()
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps the rename on one filesystem
    fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.name}.",
        suffix=".tmp",
    )

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, file_path)
    except OSError:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
