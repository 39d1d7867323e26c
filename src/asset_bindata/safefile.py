"""Atomic file output.

The generated module is written to a temporary file next to its
destination and renamed into place, so readers never observe a
partially written file.
"""

import os
import tempfile


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def safe_write_file(path: str, data: bytes, mode: int = 0o666) -> None:
    """Atomically replace path with data.

    Args:
        path: Destination file
        data: Full contents to write
        mode: Permission bits before the process umask is applied

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode & ~_current_umask())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
