"""Advisory per-destination lock for concurrent scaffold invocations."""

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Set, Union

from react_test_generator.exceptions import GenerationInProgressError

logger = logging.getLogger(__name__)


class InFlightRegistry:
    """In-memory set of test paths currently being generated."""

    def __init__(self):
        self._paths: Set[str] = set()
        self._lock = threading.Lock()

    def acquire(self, test_path: Union[str, Path]) -> bool:
        key = str(Path(test_path))
        with self._lock:
            if key in self._paths:
                return False
            self._paths.add(key)
            return True

    def release(self, test_path: Union[str, Path]) -> None:
        with self._lock:
            self._paths.discard(str(Path(test_path)))

    def is_in_flight(self, test_path: Union[str, Path]) -> bool:
        with self._lock:
            return str(Path(test_path)) in self._paths

    @contextmanager
    def claim(self, test_path: Union[str, Path]) -> Iterator[None]:
        """Hold ``test_path`` for the duration of one invocation."""
        if not self.acquire(test_path):
            raise GenerationInProgressError(
                f"Test file is already being generated: {test_path}",
                test_path=str(test_path),
                suggestion="Wait for the running generation to finish and try again."
            )
        logger.debug(f"Claimed {test_path}")
        try:
            yield
        finally:
            self.release(test_path)
            logger.debug(f"Released {test_path}")


# Shared by every service in the process
default_registry = InFlightRegistry()
