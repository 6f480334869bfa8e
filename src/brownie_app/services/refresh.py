"""Write-then-reread discipline shared by every mutating action.

A write is never reflected by patching local state. After the service
confirms it, the affected collection is read again and that read replaces the
view state wholesale. A failed re-read does not turn a committed write into a
failure; it is reported separately through ``refresh_error``.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar

from .errors import OperationError, normalize_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class MutationOutcome(Generic[T]):
    committed: bool
    data: T | None = None
    error: OperationError | None = None
    refresh_error: OperationError | None = None

    @property
    def refreshed(self) -> bool:
        return self.committed and self.refresh_error is None


def run_mutation(
    write: Callable[[], Any],
    refresh: Callable[[], T],
    *,
    action: str = "mutation",
) -> MutationOutcome[T]:
    try:
        write()
    except Exception as exc:
        error = normalize_error(exc)
        logger.warning("mutation_failed", extra={"action": action, "kind": error.kind})
        return MutationOutcome(committed=False, error=error)
    logger.info("mutation_committed", extra={"action": action})
    try:
        data = refresh()
    except Exception as exc:
        error = normalize_error(exc)
        logger.warning("refresh_failed", extra={"action": action, "kind": error.kind})
        return MutationOutcome(committed=True, refresh_error=error)
    return MutationOutcome(committed=True, data=data)


def gather_reads(loaders: Mapping[str, Callable[[], Any]]) -> dict[str, Any]:
    """Run independent reads concurrently and join on all of them.

    Raises the first failure in ``loaders`` order once every read finished.
    """
    if not loaders:
        return {}
    with ThreadPoolExecutor(max_workers=len(loaders)) as pool:
        futures = {key: pool.submit(loader) for key, loader in loaders.items()}
    results: dict[str, Any] = {}
    for key, future in futures.items():
        exc = future.exception()
        if exc is not None:
            raise normalize_error(exc) from exc
        results[key] = future.result()
    return results
