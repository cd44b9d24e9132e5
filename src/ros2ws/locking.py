# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : locking.py
#   file_relpath : src/ros2ws/locking.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cooperative exclusive locking of a manifest file.

Parallel builds of a ROS 2 workspace may each run ``cargo ros2ws`` against the
same ``Cargo.toml``. `FileLock` serializes their read → edit → write cycles
with an advisory ``flock(2)`` lock on the manifest itself:

```python
with FileLock(path, enabled=with_lock, timeout=wait_nsecs):
    manifest = Manifest.read_from(path)
    manifest.add_member(member)
    manifest.write_to(path)
```

Notes:
    - The lock is advisory: only invocations that also lock are excluded.
    - Acquisition polls a non-blocking lock attempt until a monotonic deadline;
      ``timeout=0`` polls forever. There is no fairness between waiters.
    - The lock and the file handle are released on scope exit, also on errors.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import IO, TYPE_CHECKING

from ros2ws.config.logging import get_logger
from ros2ws.constants import DEFAULT_LOCK_POLL_INTERVAL
from ros2ws.errors import LockTimeoutError, ManifestIOError, Ros2wsError, ValidationError

if os.name != "nt":  # pragma: no cover - platform specific
    import fcntl

if TYPE_CHECKING:
    from types import TracebackType

    from ros2ws.config.logging import Ros2wsLogger
    from ros2ws.manifest.validation import StrPath

logger: Ros2wsLogger = get_logger(__name__)


def _try_lock_exclusive(fh: IO[bytes]) -> bool:
    """Attempt a non-blocking exclusive lock; return False if another holder has it."""
    try:
        fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
    except BlockingIOError:
        return False
    return True


def _unlock(fh: IO[bytes]) -> None:
    fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


class FileLock:
    """Context manager holding an exclusive advisory lock on a file.

    Args:
        path (StrPath): File to lock. It must exist.
        enabled (bool): When False, entering and leaving the context does nothing.
        timeout (float): Seconds to keep retrying before giving up; 0 waits forever.
        poll_interval (float): Seconds to sleep between two lock attempts.

    Attributes:
        path (Path): File to lock.
        enabled (bool): Whether locking is active.
        timeout (float): Retry deadline in seconds (0 = forever).
        poll_interval (float): Delay between attempts.
    """

    path: Path
    enabled: bool
    timeout: float
    poll_interval: float

    def __init__(
        self,
        path: StrPath,
        *,
        enabled: bool = True,
        timeout: float = 0,
        poll_interval: float = DEFAULT_LOCK_POLL_INTERVAL,
    ) -> None:
        if timeout < 0:
            raise ValidationError(f"lock timeout must not be negative: {timeout}")
        self.path = Path(path)
        self.enabled = enabled
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._fh: IO[bytes] | None = None

    @property
    def locked(self) -> bool:
        """Whether this instance currently holds the lock."""
        return self._fh is not None

    def acquire(self) -> None:
        """Open the file and poll for the exclusive lock.

        Raises:
            Ros2wsError: If locking is unsupported on this platform.
            ManifestIOError: If the file cannot be opened or locking fails for
                another reason than contention.
            LockTimeoutError: If the lock is still held elsewhere when the deadline passes.
        """
        if not self.enabled or self._fh is not None:
            return
        if os.name == "nt":
            raise Ros2wsError("file locking is only supported on POSIX systems")

        try:
            fh: IO[bytes] = open(self.path, "rb")  # noqa: SIM115
        except OSError as exc:
            raise ManifestIOError(self.path, "open", str(exc)) from exc

        deadline: float | None = None if self.timeout == 0 else time.monotonic() + self.timeout
        attempts: int = 0
        try:
            while True:
                attempts += 1
                if _try_lock_exclusive(fh):
                    break
                if deadline is not None:
                    remaining: float = deadline - time.monotonic()
                    if remaining <= 0:
                        raise LockTimeoutError(self.path, self.timeout)
                    time.sleep(min(self.poll_interval, remaining))
                else:
                    time.sleep(self.poll_interval)
                logger.trace("Waiting for lock on %s (attempt %d)", self.path, attempts)
        except OSError as exc:
            fh.close()
            raise ManifestIOError(self.path, "lock", str(exc)) from exc
        except BaseException:
            fh.close()
            raise

        self._fh = fh
        logger.debug("Acquired lock on %s after %d attempt(s)", self.path, attempts)

    def release(self) -> None:
        """Release the lock and close the file; a no-op when not held."""
        fh: IO[bytes] | None = self._fh
        if fh is None:
            return
        self._fh = None
        try:
            _unlock(fh)
        finally:
            fh.close()
        logger.debug("Released lock on %s", self.path)

    def __enter__(self) -> FileLock:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
