"""
barcodes.internal_code - Store-minted internal barcodes.

Format:  PREFIX + TTTTTTTT + RR
         T = last 8 digits of the clock in milliseconds
         R = 2 random digits, zero-padded

Uniqueness is only guaranteed within the running process, through a
CodeRegistry.  The registry is injectable; the module-level helpers
share one default instance.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Callable, Optional

from barcodes.formats import DEFAULT_INTERNAL_PREFIX, is_valid_internal_code

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


class RegistryExhaustedError(RuntimeError):
    """No unused code could be minted within the attempt limit."""


class CodeRegistry:
    """Thread-safe set of codes minted in this process."""

    def __init__(self):
        self._codes: set[str] = set()
        self._lock = threading.Lock()

    def claim(self, code: str) -> bool:
        """Insert *code* if unseen.  Returns False when already present."""
        with self._lock:
            if code in self._codes:
                return False
            self._codes.add(code)
            return True

    def add(self, code: str) -> None:
        with self._lock:
            self._codes.add(code)

    def is_generated(self, code: str) -> bool:
        with self._lock:
            return code in self._codes

    __contains__ = is_generated

    def clear(self) -> None:
        with self._lock:
            self._codes.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._codes)


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


class InternalCodeGenerator:
    """
    Mint PREFIX + timestamp + random codes, never repeating one that the
    registry already holds.

    Args:
        registry:     CodeRegistry to record codes in (new one if None)
        clock:        callable returning the current time in milliseconds
        rng:          random.Random-like source for the two trailing digits
        max_attempts: candidates tried before giving up
    """

    def __init__(self, registry: Optional[CodeRegistry] = None,
                 clock: Optional[Callable[[], int]] = None,
                 rng: Optional[random.Random] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.registry = registry if registry is not None else CodeRegistry()
        self._clock = clock or _clock_ms
        self._rng = rng or random.Random()
        self.max_attempts = max_attempts

    def candidate(self, prefix: str = DEFAULT_INTERNAL_PREFIX) -> str:
        timestamp = str(self._clock()).zfill(8)[-8:]
        suffix = f"{self._rng.randrange(100):02d}"
        return f"{prefix}{timestamp}{suffix}"

    def generate(self, prefix: str = DEFAULT_INTERNAL_PREFIX) -> str:
        """Return a fresh code.  Raises RegistryExhaustedError after max_attempts."""
        for attempt in range(1, self.max_attempts + 1):
            code = self.candidate(prefix)
            if not is_valid_internal_code(code, prefix):
                raise RuntimeError(f"minted code {code!r} fails its own format")
            if self.registry.claim(code):
                logger.info(f"Minted internal code {code} (attempt {attempt})")
                return code
            logger.debug(f"Internal code collision: {code}")
        raise RegistryExhaustedError(
            f"unable to mint unique code after {self.max_attempts} attempts"
        )


# ── Module-level default ───────────────────────────────────────────────

_default_generator = InternalCodeGenerator()


def generate_internal_code(prefix: str = DEFAULT_INTERNAL_PREFIX) -> str:
    return _default_generator.generate(prefix)


def is_generated(code: str) -> bool:
    """Was *code* minted by the default generator in this process?"""
    return _default_generator.registry.is_generated(code)


def clear_registry() -> None:
    _default_generator.registry.clear()


def default_generator() -> InternalCodeGenerator:
    return _default_generator
