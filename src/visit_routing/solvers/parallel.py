"""
Parallel multi-start Iterated Local Search.

Runs independent ILS instances with distinct seeds on a shared read-only
distance matrix and keeps the cheapest result. Workers never exchange
state; the only synchronization point is collecting their results.
"""

import concurrent.futures
import logging
import os
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..core.errors import ConfigurationError, SolverError
from ..core.evaluator import validate_tour
from ..core.solution import ParallelResult, RunResult
from ..distance.matrix import validate_distance_matrix
from .ils.config import ILSConfig
from .ils.orchestrator import run_ils

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    """Available parallelism minus one, at least one."""
    return max(1, (os.cpu_count() or 1) - 1)


def worker_seed(base_seed: Optional[int], worker_id: int) -> Optional[int]:
    """Deterministic per-worker seed; None keeps workers unseeded."""
    if base_seed is None:
        return None
    return base_seed + worker_id


def _run_worker(
    initial: List[int], matrix: np.ndarray, config: ILSConfig, worker_id: int
) -> RunResult:
    """Entry point of one worker (module level so it can be pickled)."""
    return run_ils(
        initial,
        matrix,
        config.with_seed(worker_seed(config.seed, worker_id)),
        worker_id=worker_id,
    )


def solve_parallel(
    initial_tour: Sequence[int],
    matrix,
    config: Optional[ILSConfig] = None,
    worker_count: Optional[int] = None,
    *,
    use_processes: bool = True,
) -> ParallelResult:
    """
    Run independent ILS instances concurrently and keep the best.

    Worker k runs with seed config.seed + k, so the overall result is
    reproducible when config.seed is set. A worker that raises is counted
    as failed and does not stop the others.

    Args:
        initial_tour: Starting permutation shared by all workers
        matrix: (n, n) symmetric distance matrix
        config: Run configuration (defaults to ILSConfig())
        worker_count: Number of runs (defaults to cpu_count - 1)
        use_processes: Use a process pool (True) or a thread pool (False)

    Returns:
        ParallelResult with the best run and completed/failed counts

    Raises:
        ConfigurationError: If the inputs or worker_count are invalid
        SolverError: If every worker failed
    """
    if config is None:
        config = ILSConfig()
    if worker_count is None:
        worker_count = default_worker_count()
    if worker_count < 1:
        raise ConfigurationError(f"worker_count must be at least 1, got {worker_count}")

    dist = validate_distance_matrix(matrix)
    initial = validate_tour(initial_tour, dist.shape[0])

    executor_cls = (
        concurrent.futures.ProcessPoolExecutor
        if use_processes
        else concurrent.futures.ThreadPoolExecutor
    )

    results: List[RunResult] = []
    errors: Dict[int, str] = {}

    logger.info(
        f"[PARALLEL] starting {worker_count} workers "
        f"({'processes' if use_processes else 'threads'}), base seed={config.seed}"
    )
    with executor_cls(max_workers=worker_count) as executor:
        future_to_worker = {
            executor.submit(_run_worker, initial, dist, config, worker_id): worker_id
            for worker_id in range(worker_count)
        }
        for future in concurrent.futures.as_completed(future_to_worker):
            worker_id = future_to_worker[future]
            try:
                results.append(future.result())
            except Exception as exc:
                errors[worker_id] = f"{type(exc).__name__}: {exc}"
                logger.warning(f"[PARALLEL] worker {worker_id} failed: {errors[worker_id]}")

    if not results:
        logger.error(f"[PARALLEL] all {worker_count} workers failed")
        raise SolverError(f"all {worker_count} workers failed", errors)

    results.sort(key=lambda r: r.worker_id)
    best = min(results, key=lambda r: (r.best_cost, r.worker_id))

    logger.info(
        f"[PARALLEL] best={best.best_cost:.4f} from worker {best.worker_id}; "
        f"{len(results)} completed, {len(errors)} failed"
    )
    return ParallelResult(
        best=best,
        results=tuple(results),
        completed=len(results),
        failed=len(errors),
        errors=errors,
    )
