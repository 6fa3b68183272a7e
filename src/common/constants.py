"""Shared constants for the statistics library."""

import logging

# ── Empty-input conventions ─────────────────────────────────────────────────
# mean and l2 define the empty sample as 0.0; stddev and median return None.
EMPTY_MEAN = 0.0
EMPTY_L2 = 0.0

# Order used by summaries and the dispatch table
STAT_ORDER = ("mean", "stddev", "median", "l2")

# Rendered in place of an undefined statistic
UNDEFINED_MARK = "—"

# Logging
DEFAULT_LOG_LEVEL = logging.INFO
