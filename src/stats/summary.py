"""Name-based access to the statistics and one-line summaries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.common.constants import STAT_ORDER, UNDEFINED_MARK
from src.common.logging import get_logger
from src.stats.errors import UnknownStatisticError
from src.stats.functions import STAT_FNS, StatFn

log = get_logger("summary")


def get_stat(name: str) -> StatFn:
    """Look up a statistics function by name (``mean``, ``stddev``, ...)."""
    try:
        return STAT_FNS[name]
    except KeyError:
        raise UnknownStatisticError(name, STAT_FNS) from None


def summarize(
    nums: Sequence[float],
    names: Iterable[str] | None = None,
) -> dict[str, float | None]:
    """Evaluate the named statistics over *nums*.

    Defaults to every statistic, in ``STAT_ORDER``. Undefined results are
    kept as ``None``. All names are resolved before anything is computed.
    """
    fns = [(name, get_stat(name)) for name in (STAT_ORDER if names is None else names)]
    result: dict[str, float | None] = {}
    for name, fn in fns:
        value = fn(nums)
        if value is None:
            log.debug("statistic_undefined", stat=name, n=len(nums))
        result[name] = value
    return result


def _fmt(v: float | None) -> str:
    return UNDEFINED_MARK if v is None else f"{v:,.4g}"


def fmt_stat(nums: Sequence[float]) -> str:
    """Full stats: mean ± σ  [med, l2]  (n=...)."""
    if len(nums) == 0:
        return UNDEFINED_MARK
    s = summarize(nums)
    return (
        f"{_fmt(s['mean'])} ± {_fmt(s['stddev'])}"
        f"  [med={_fmt(s['median'])}, l2={_fmt(s['l2'])}]"
        f"  (n={len(nums)})"
    )
