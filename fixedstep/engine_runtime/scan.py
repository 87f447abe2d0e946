"""
Parameter scans over independent runs.

Each parameter value gets its own run, built from scratch by the caller's
``run_fn``: its own context, its own conditions and its own recorders.
Runs may execute on a thread pool; nothing stateful is shared between them.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar

P = TypeVar("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def scan(run_fn: Callable[[P], R], parameters: Iterable[P],
         max_workers: Optional[int] = None) -> List[R]:
    """Run ``run_fn(p)`` for every ``p`` and return results in input order.

    ``max_workers=1`` runs serially in the calling thread. An exception
    raised by any run propagates to the caller.
    """
    params = list(parameters)
    if not params:
        return []

    if max_workers == 1:
        logger.debug(f"Scanning {len(params)} parameters serially")
        return [run_fn(p) for p in params]

    logger.debug(f"Scanning {len(params)} parameters on a thread pool (max_workers={max_workers})")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(run_fn, params))
