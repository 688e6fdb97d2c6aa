"""
Batch Projection.

Applies a projection (or a conversion pipe) to many points at once. The
result always has the same order as the input, whether the points were
processed serially or on a thread pool.

Error Policy
------------
Batches abort: if any point fails, the error raised for the first
failing point in input order is re-raised unchanged and no partial
result is returned. The index of that point is logged at WARNING.

Parallelism
-----------
Projections and pipes are immutable, so one instance is shared by all
worker threads. `concurrent.futures.ThreadPoolExecutor.map` yields
results in submission order, which gives both the output order and the
"first failure in input order" rule for free.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Tuple
import numpy as np
from numpy.typing import NDArray

from common.config import BatchConfig, DEFAULT_BATCH_CONFIG
from common.logging_config import get_logger
from projections.base import Projection
from projections.pipeline import ConversionPipe

logger = get_logger(__name__)

PointFunction = Callable[[float, float], Tuple[float, float]]


def _as_points(points: Any) -> NDArray[np.float64]:
    """Coerce array-like input to an (N, 2) float64 array."""
    array = np.asarray(points, dtype=np.float64)
    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(
            f"Expected points of shape (N, 2), got {array.shape}"
        )
    return array


def _run(
    func: PointFunction,
    points: Any,
    config: Optional[BatchConfig],
    operation: str
) -> NDArray[np.float64]:
    """Apply `func` to every row of `points`, preserving order."""
    config = config or DEFAULT_BATCH_CONFIG
    array = _as_points(points)
    n_points = len(array)
    result = np.empty((n_points, 2), dtype=np.float64)

    if n_points == 0:
        return result

    parallel = not config.is_serial and n_points >= config.parallel_threshold
    completed = 0

    try:
        if parallel:
            with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
                for out in executor.map(func, array[:, 0], array[:, 1]):
                    result[completed] = out
                    completed += 1
        else:
            for a, b in array:
                result[completed] = func(a, b)
                completed += 1
    except Exception as e:
        logger.warning(
            f"{operation} aborted at element {completed} of {n_points}: "
            f"{type(e).__name__}: {e}"
        )
        raise

    logger.debug(
        f"{operation}: {n_points} points ({'parallel' if parallel else 'serial'})"
    )
    return result


def project_batch(
    projection: Projection,
    points: Any,
    config: Optional[BatchConfig] = None
) -> NDArray[np.float64]:
    """Project many geographic points.

    Parameters
    ----------
    projection : Projection
        Projection to apply.
    points : array-like, shape (N, 2)
        (lon, lat) pairs in degrees.
    config : BatchConfig, optional
        Parallelism settings (default: `DEFAULT_BATCH_CONFIG`).

    Returns
    -------
    np.ndarray, shape (N, 2)
        (x, y) pairs, row i corresponding to input row i.

    Raises
    ------
    ValueError
        If `points` does not have shape (N, 2).
    ProjectionError
        The error of the first failing point in input order.
    """
    return _run(projection.project, points, config, "project_batch")


def inverse_project_batch(
    projection: Projection,
    points: Any,
    config: Optional[BatchConfig] = None
) -> NDArray[np.float64]:
    """Inverse-project many planar points.

    Same contract as `project_batch`, with (x, y) rows in and
    (lon, lat) rows out.
    """
    return _run(projection.inverse_project, points, config, "inverse_project_batch")


def convert_batch(
    pipe: ConversionPipe,
    points: Any,
    config: Optional[BatchConfig] = None
) -> NDArray[np.float64]:
    """Convert many points through a `ConversionPipe`.

    Same contract as `project_batch`, with source planar rows in and
    target planar rows out.
    """
    return _run(pipe.convert, points, config, "convert_batch")
