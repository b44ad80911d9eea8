"""
Persistence Gateway - background JSON file writes.

Each store owns one JsonFileWriter. Callers serialize a snapshot on their
own thread and enqueue the bytes; a single worker thread drains the queue
in FIFO order and writes each snapshot atomically. Failed writes are
logged and dropped, the next save is the only retry.
"""
import logging
import os
import queue
import tempfile
import threading
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_STOP = object()


def read_json_file(path: Path) -> Optional[bytes]:
    """Read a persisted file; None when it does not exist yet."""
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        return None


def write_atomic(path: Path, data: bytes) -> None:
    """Write to a temp file beside the target, then rename over it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


class JsonFileWriter:
    """Single-worker FIFO queue of snapshot writes for one file."""

    def __init__(self, path: Path, name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or self.path.stem
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self.failed_writes = 0

    def _ensure_started(self) -> None:
        with self._lock:
            if self._thread is None or not self._thread.is_alive():
                self._thread = threading.Thread(
                    target=self._run,
                    name=f"{self.name}-writer",
                    daemon=True,
                )
                self._thread.start()

    def _run(self) -> None:
        while True:
            data = self._queue.get()
            try:
                if data is _STOP:
                    return
                write_atomic(self.path, data)
            except OSError as e:
                self.failed_writes += 1
                logger.error(f"Failed to save {self.name} to {self.path}: {e}")
            finally:
                self._queue.task_done()

    def submit(self, data: bytes) -> None:
        """Enqueue a serialized snapshot; returns immediately."""
        self._ensure_started()
        self._queue.put(data)

    def flush(self) -> None:
        """Block until every queued snapshot has been written or dropped."""
        if self._thread is None:
            return
        self._queue.join()

    def close(self) -> None:
        """Flush pending writes and stop the worker."""
        if self._thread is None:
            return
        self._queue.put(_STOP)
        self._queue.join()
        self._thread.join()
        self._thread = None
