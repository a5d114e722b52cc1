"""Utilities for plotting recorded search histories with Matplotlib."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from matplotlib.axes import Axes
else:  # pragma: no cover - fall back when matplotlib is absent
    Axes = Any  # type: ignore

_REQUIRED_KEYS = ("evaluation", "x", "objective", "ok")


def history_to_arrays(
    history: Mapping[str, Sequence[Any]],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Convert a recorder history into evaluation index, x, objective and ok arrays."""

    missing = [key for key in _REQUIRED_KEYS if key not in history]
    if missing:
        raise KeyError(
            f"History mapping must include {', '.join(repr(k) for k in _REQUIRED_KEYS)}; "
            f"missing {', '.join(repr(k) for k in missing)}."
        )

    evaluations = np.asarray(history["evaluation"], dtype=float)
    xs = np.asarray(history["x"], dtype=float)
    objectives = np.asarray(history["objective"], dtype=float)
    ok = np.asarray(history["ok"], dtype=bool)
    if not (len(evaluations) == len(xs) == len(objectives) == len(ok)):
        raise ValueError("History arrays must share the same length.")
    return evaluations, xs, objectives, ok


def plot_search_history(
    ax: Axes,
    history: Mapping[str, Sequence[Any]],
    *,
    label: str | None = None,
    against: str = "evaluation",
    show_best: bool = True,
    line_kwargs: Mapping[str, Any] | None = None,
    bad_kwargs: Mapping[str, Any] | None = None,
) -> List[Any]:
    """Plot the objective of each recorded evaluation on ``ax``.

    Parameters
    ----------
    ax:
        Matplotlib axes to draw on.
    history:
        Mapping as returned by :meth:`EventRecorder.history`.
    label:
        Legend label of the objective trace.
    against:
        ``"evaluation"`` to plot against the evaluation index or ``"x"`` to plot
        against the evaluated position.
    show_best:
        Also draw the best-so-far objective when ``history`` carries ``best_objective``
        (only meaningful against the evaluation index).
    line_kwargs:
        Additional keyword arguments forwarded to ``ax.plot``.
    bad_kwargs:
        Keyword arguments for the scatter marking failed, rejected or non-finite
        evaluations. Defaults to black ``"x"`` markers drawn at the position.

    Returns
    -------
    list of Matplotlib artists added to the axes.
    """

    evaluations, xs, objectives, ok = history_to_arrays(history)
    artists: List[Any] = []

    if evaluations.size == 0:
        return artists

    if against == "evaluation":
        abscissa = evaluations
        plot_opts = {"marker": "o"}
    elif against == "x":
        abscissa = xs
        plot_opts = {"marker": "o", "linestyle": "none"}
    else:
        raise ValueError(f"Unsupported abscissa '{against}'. Expected 'evaluation' or 'x'.")

    good = np.flatnonzero(ok)
    plot_opts.update(dict(line_kwargs or {}))
    plot_opts.update({"label": label})
    artists.extend(ax.plot(abscissa[good], objectives[good], **plot_opts))

    if show_best and against == "evaluation" and "best_objective" in history:
        best = np.asarray(history["best_objective"], dtype=float)
        artists.extend(
            ax.step(abscissa, best, where="post", linestyle="--", label="best so far")
        )

    bad_indices = np.flatnonzero(~ok)
    if bad_indices.size:
        bad_opts = {"marker": "x", "color": "black", "label": None, "zorder": 3}
        if bad_kwargs:
            bad_opts.update(bad_kwargs)
        # failed evaluations have no objective; mark them on the best-so-far level
        fallback = np.asarray(history.get("best_objective", objectives), dtype=float)
        bad_y = np.where(np.isfinite(objectives), objectives, fallback)[bad_indices]
        scatter = ax.scatter(abscissa[bad_indices], bad_y, **bad_opts)
        artists.append(scatter)

    return artists


__all__ = ["history_to_arrays", "plot_search_history"]
