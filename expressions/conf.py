"""
App settings for the expressions app.

Read from the ``EXPRESSIONS`` dict in Django settings; missing keys use
DEFAULTS.
"""
from typing import Any, Dict

from django.conf import settings

DEFAULTS = {
    "STRICT": False,           # parse mode when a caller does not choose one
    "STRICT_DIVISION": False,  # raise DivisionByZero instead of returning inf/nan
    "MAX_LENGTH": 1000,        # longest expression accepted over HTTP
}


def expression_settings() -> Dict[str, Any]:
    configured = getattr(settings, "EXPRESSIONS", None) or {}
    merged = dict(DEFAULTS)
    merged.update(configured)
    return merged


def get_setting(name: str) -> Any:
    if name not in DEFAULTS:
        raise KeyError(f"Unknown EXPRESSIONS setting '{name}'")
    return expression_settings()[name]
