# src/tool_adapter/observability/names.py

"""Standard metric names for tool-adapter observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Conversion Metrics
# ============================================================================

# Duration
TOOL_ADAPT_DURATION = "tool_adapt_duration"

# Counters
TOOL_ADAPT_TOTAL = "tool_adapt_total"
TOOL_ADAPT_ERRORS_TOTAL = "tool_adapt_errors_total"

# Gauges
TOOL_ADAPT_BATCH_SIZE = "tool_adapt_batch_size"
