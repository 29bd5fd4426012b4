# src/ini_kit/observability/names.py

"""Standard metric names for ini-kit observability.

Use these constants instead of hardcoded strings so every backend sees
the same series.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
CONF_PARSE_DURATION = "conf_parse_duration"

# Counters
CONF_PARSE_REQUESTS_TOTAL = "conf_parse_requests_total"
CONF_PARSE_ERRORS_TOTAL = "conf_parse_errors_total"

# Gauges (size of the most recently parsed document)
CONF_SECTIONS_PARSED = "conf_sections_parsed"
CONF_KEYS_PARSED = "conf_keys_parsed"


# ============================================================================
# Loader Metrics
# ============================================================================

# Counters
CONF_FILES_OPENED_TOTAL = "conf_files_opened_total"
