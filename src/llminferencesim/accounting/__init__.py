"""Token budget and context window accounting."""

from .budget import InvalidBudgetError, resolve_max_tokens
from .context_window import ContextWindowCheck, validate_context_window

__all__ = [
    "InvalidBudgetError",
    "resolve_max_tokens",
    "ContextWindowCheck",
    "validate_context_window",
]
