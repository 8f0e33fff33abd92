import numpy as np
from ActuatorLine.errors import InterpolationError


def _check_table(x_old: np.ndarray, y_old: np.ndarray) -> None:
    if x_old.ndim != 1 or y_old.ndim != 1:
        raise InterpolationError("x_old and y_old must be 1D arrays.")
    if len(x_old) != len(y_old):
        raise InterpolationError(
            f"x_old and y_old must have same length ({len(x_old)} != {len(y_old)})."
        )
    if len(x_old) == 0:
        raise InterpolationError("Cannot interpolate from an empty table.")


def interpolate(x_new, x_old, y_old):
    """
    Piecewise-linear lookup in an ordered table.

    Parameters
    ----------
    x_new : float or array_like
        Query point(s).
    x_old : array_like
        Strictly increasing abscissa.
    y_old : array_like
        Ordinate, same length as x_old.

    Returns
    -------
    float or np.ndarray
        float for a scalar query, array otherwise.

    Notes
    -----
    - A one-point table returns its only y for every query.
    - Outside [x_old[0], x_old[-1]] the edge segment is extended linearly
      (not clamped to the edge value).
    - Knot points are returned exactly.
    """
    x_old = np.asarray(x_old, dtype=float)
    y_old = np.asarray(y_old, dtype=float)
    _check_table(x_old, y_old)

    x = np.asarray(x_new, dtype=float)
    n = len(x_old)

    if n == 1:
        y = np.full_like(x, y_old[0])
    else:
        # Segment i spans [x_old[i], x_old[i+1]]; edge segments extrapolate
        i = np.clip(np.searchsorted(x_old, x, side="right") - 1, 0, n - 2)
        x0, x1 = x_old[i], x_old[i + 1]
        y0, y1 = y_old[i], y_old[i + 1]
        y = y0 + (y1 - y0) * (x - x0) / (x1 - x0)
        y = np.where(x == x_old[-1], y_old[-1], y)

    if y.ndim == 0:
        return float(y)
    return y


def is_extrapolating(x_new, x_old) -> bool:
    """True if any query point lies outside the table's abscissa range."""
    x = np.asarray(x_new, dtype=float)
    return bool(np.any(x < x_old[0]) or np.any(x > x_old[-1]))


def union_grid(*grids) -> np.ndarray:
    """Sorted union of several abscissa grids (duplicates removed)."""
    if not grids:
        return np.array([], dtype=float)
    return np.unique(np.concatenate([np.asarray(g, dtype=float) for g in grids]))
