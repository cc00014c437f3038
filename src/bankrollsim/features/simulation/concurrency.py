from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any

from ...core.config import worker_count

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_executor: ThreadPoolExecutor | None = None


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _lock:
        if _executor is None:
            workers = worker_count()
            logger.debug("Starting batch pool with %d workers", workers)
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="bankrollsim-batch")
        return _executor


def shutdown_executor() -> None:
    """Stop the batch pool. The next :func:`run_blocking` call starts a new one."""

    global _executor
    with _lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=True)


async def run_blocking(func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
    """Run a CPU-bound engine call on the batch pool."""

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_get_executor(), partial(func, *args, **kwargs))
