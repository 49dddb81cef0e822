"""Bounded, order-preserving parallel map over a ``ThreadPoolExecutor``.

Used to fold customer ledgers side by side. Each item handed to the mapper
must be independent of every other item; the helper does no locking of its
own.

- ``concurrency`` caps the number of mapper calls in flight.
- ``concurrency == 1`` runs inline on the calling thread with no pool.
- The first mapper error cancels work that has not started and propagates.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import TypeVar

InT = TypeVar("InT")
OutT = TypeVar("OutT")


def p_map(
    iterable: Iterable[InT],
    mapper: Callable[[InT], OutT],
    *,
    concurrency: int,
) -> list[OutT]:
    """Map ``iterable`` through ``mapper`` with at most ``concurrency`` workers.

    Results come back in input order.
    """

    if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
        raise ValueError("concurrency must be a positive integer")

    if concurrency == 1:
        return [mapper(item) for item in iterable]

    it = enumerate(iterable)
    results: dict[int, OutT] = {}
    future_to_idx: dict[Future[OutT], int] = {}

    def _submit(pool: ThreadPoolExecutor) -> Future[OutT] | None:
        try:
            idx, item = next(it)
        except StopIteration:
            return None
        fut = pool.submit(mapper, item)
        future_to_idx[fut] = idx
        return fut

    with ThreadPoolExecutor(max_workers=concurrency) as pool:
        active: set[Future[OutT]] = set()
        for _ in range(concurrency):
            fut = _submit(pool)
            if fut is None:
                break
            active.add(fut)

        while active:
            done, active = wait(active, return_when=FIRST_COMPLETED)
            for fut in done:
                idx = future_to_idx.pop(fut)
                exc = fut.exception()
                if exc is not None:
                    pool.shutdown(wait=False, cancel_futures=True)
                    raise exc
                results[idx] = fut.result()
            # Top up the window by one task per completion.
            for _ in range(len(done)):
                fut = _submit(pool)
                if fut is None:
                    break
                active.add(fut)

    return [results[i] for i in range(len(results))]


__all__ = ["p_map"]
