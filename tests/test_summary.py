import pytest
from structlog.testing import capture_logs

from src.stats.errors import UnknownStatisticError
from src.stats.functions import l2, mean
from src.stats.summary import fmt_stat, get_stat, summarize


def test_get_stat():
    """Test looking up statistics by name"""
    assert get_stat("mean") is mean
    assert get_stat("l2") is l2
    assert get_stat("median")([0.0, 0.5, -1.0, 1.0]) == 0.0


def test_get_stat_unknown():
    """Unknown names raise a KeyError subclass listing the known names"""
    with pytest.raises(UnknownStatisticError) as exc_info:
        get_stat("variance")

    err = exc_info.value
    assert isinstance(err, KeyError)
    assert err.name == "variance"
    assert err.known == ("mean", "stddev", "median", "l2")
    assert "variance" in str(err)
    assert "stddev" in str(err)


def test_summarize_all():
    """Default summary evaluates every statistic in order"""
    result = summarize([-3.0, 4.0])
    assert list(result) == ["mean", "stddev", "median", "l2"]
    assert result == {"mean": 0.5, "stddev": 3.5, "median": -3.0, "l2": 5.0}


def test_summarize_selected():
    """Only the requested statistics are computed"""
    assert summarize([12.0, -35.0], names=["l2"]) == {"l2": 37.0}


def test_summarize_unknown_name_computes_nothing():
    """Name resolution fails before any statistic runs"""
    with capture_logs() as logs:
        with pytest.raises(UnknownStatisticError):
            summarize([], names=["stddev", "mode"])
    assert logs == []


def test_summarize_empty_logs_undefined():
    """Undefined statistics are kept as None and logged at debug level"""
    with capture_logs() as logs:
        result = summarize([])

    assert result == {"mean": 0.0, "stddev": None, "median": None, "l2": 0.0}
    assert [(e["event"], e["stat"], e["log_level"]) for e in logs] == [
        ("statistic_undefined", "stddev", "debug"),
        ("statistic_undefined", "median", "debug"),
    ]
    assert all(e["n"] == 0 for e in logs)


def test_fmt_stat():
    """Test one-line summary formatting"""
    assert fmt_stat([-3.0, 4.0]) == "0.5 ± 3.5  [med=-3, l2=5]  (n=2)"


def test_fmt_stat_empty():
    """An empty sample renders as the undefined mark"""
    assert fmt_stat([]) == "—"
