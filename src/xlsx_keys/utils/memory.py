"""Memory management utilities."""

from __future__ import annotations

import psutil

from xlsx_keys.utils.constants import MAX_MEMORY_MB


def check_memory(limit_mb: float = MAX_MEMORY_MB) -> None:
    """Raise if current process exceeds memory budget."""
    from xlsx_keys.utils.errors import MemoryExceededError

    memory_mb = get_memory_mb()
    if memory_mb > limit_mb:
        raise MemoryExceededError(memory_mb, limit_mb)


def get_memory_mb() -> float:
    """Return current process memory in MB."""
    return psutil.Process().memory_info().rss / 1024 / 1024
