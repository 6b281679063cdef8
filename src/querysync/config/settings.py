"""Where: src/querysync/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from querysync.config.config import (
    API_BASE_URL_DEFAULT,
    MODAL_PARAM_DEFAULT,
    REQUEST_TIMEOUT_SECONDS_DEFAULT,
    config as app_config,
)

# URL state ------------------------------------------------------------------

_modal_param = getattr(app_config, "modal_param", MODAL_PARAM_DEFAULT)
MODAL_PARAM: str = (
    _modal_param.strip()
    if isinstance(_modal_param, str) and _modal_param.strip()
    else MODAL_PARAM_DEFAULT
)


# Query cache ----------------------------------------------------------------

# Non-positive values disable age-based staleness; entries then refetch only
# after a mutation invalidates them.
_stale_after = getattr(app_config, "query_stale_after_seconds", None)
QUERY_STALE_AFTER_SECONDS: float | None = (
    float(_stale_after)
    if isinstance(_stale_after, (int, float))
    and not isinstance(_stale_after, bool)
    and _stale_after > 0
    else None
)


# Transport ------------------------------------------------------------------

API_BASE_URL: str = (app_config.api_base_url or API_BASE_URL_DEFAULT).rstrip("/")

_timeout = getattr(app_config, "request_timeout_seconds", REQUEST_TIMEOUT_SECONDS_DEFAULT)
REQUEST_TIMEOUT_SECONDS: float = (
    float(_timeout)
    if isinstance(_timeout, (int, float)) and not isinstance(_timeout, bool) and _timeout > 0
    else REQUEST_TIMEOUT_SECONDS_DEFAULT
)


__all__ = [
    "API_BASE_URL",
    "MODAL_PARAM",
    "QUERY_STALE_AFTER_SECONDS",
    "REQUEST_TIMEOUT_SECONDS",
]
