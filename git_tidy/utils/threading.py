"""Threading helpers for running git calls side by side."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional, TypeVar

from git_tidy.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def run_all(func: Callable[[T], R], items: Iterable[T], name: str = "batch") -> List[R]:
    """Call func on every item at once and join the calls as one unit.

    One thread is started per item, with no cap. The pool is always drained
    before returning, so calls that are already running finish even when a
    sibling fails. If any call raised, the first failure observed is
    re-raised once the batch has completed.

    Args:
        func: Callable applied to each item
        items: Items to process
        name: Label used in log messages and thread names

    Returns:
        Results in the order of items
    """
    items = list(items)
    if not items:
        return []

    results: List[Optional[R]] = [None] * len(items)
    first_error: Optional[BaseException] = None

    logger.debug(f"Starting {name} with {len(items)} task(s)")
    with ThreadPoolExecutor(max_workers=len(items), thread_name_prefix=name) as executor:
        future_to_index = {executor.submit(func, item): index for index, item in enumerate(items)}

        for future in as_completed(future_to_index):
            index = future_to_index[future]
            try:
                results[index] = future.result()
            except Exception as e:
                logger.debug(f"{name} task for {items[index]!r} failed: {e}")
                if first_error is None:
                    first_error = e

    if first_error is not None:
        raise first_error

    logger.debug(f"Finished {name}")
    return results


def run_concurrently(*calls: Callable[[], R]) -> List[R]:
    """Run zero-argument callables side by side and return their results in order."""
    return run_all(lambda call: call(), calls, name="concurrent")
