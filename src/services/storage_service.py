"""Low-level JSON file I/O operations with locking."""
import json
import logging
import os
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)


def load_json(file_path: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load and parse a UTF-8 JSON file.

    Args:
        file_path: Path to JSON file
        default: Returned (as a copy) when the file doesn't exist; if None,
            a missing file is an error

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist and no default given
        json.JSONDecodeError: If JSON is malformed
    """
    if not os.path.exists(file_path):
        if default is not None:
            return json.loads(json.dumps(default))
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos)


def save_json(file_path: str, data: Dict[str, Any]) -> None:
    """
    Save data to a JSON file atomically.

    The payload is written to a temp file in the same directory, fsynced,
    then moved over the target with os.replace.

    Raises:
        IOError: If write operation fails
    """
    dir_path = os.path.dirname(file_path) or "."
    os.makedirs(dir_path, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(dir=dir_path, prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0) -> Iterator[None]:
    """
    Hold an exclusive lock for a JSON file.

    The lock lives on a sidecar ``<file>.lock`` so files that don't exist yet
    can be locked before their first write.

    Usage:
        with lock_file('data/attendees.json'):
            data = load_json('data/attendees.json', default={"attendees": []})
            data['attendees'].append(new_attendee)
            save_json('data/attendees.json', data)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    lock_fd = open(lock_path, "a+")
    start_time = time.monotonic()
    try:
        while True:
            try:
                if sys.platform == "win32":
                    lock_fd.seek(0)
                    msvcrt.locking(lock_fd.fileno(), msvcrt.LK_NBLCK, 1)
                else:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except OSError:
                if time.monotonic() - start_time > timeout:
                    logger.error(f"Lock timeout on {file_path} after {timeout}s")
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        try:
            yield
        finally:
            if sys.platform == "win32":
                lock_fd.seek(0)
                msvcrt.locking(lock_fd.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
    finally:
        lock_fd.close()
