"""llminferencesim: completion and token accounting core for a mock inference server."""

from .accounting import (
    ContextWindowCheck,
    InvalidBudgetError,
    resolve_max_tokens,
    validate_context_window,
)
from .config import ConfigurationError, SimulatorConfig
from .core import LatencyModel, LatencyProfile, RandomSource
from .models import CompletionResult
from .simulator import CompletionSimulator
from .text import (
    DEFAULT_RESPONSES,
    FinishReason,
    ResponseCorpus,
    count_tokens,
    get_random_response_text,
    get_response_text,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "CompletionSimulator",
    "CompletionResult",
    "SimulatorConfig",
    "ConfigurationError",
    "RandomSource",
    "LatencyModel",
    "LatencyProfile",
    "ResponseCorpus",
    "DEFAULT_RESPONSES",
    "FinishReason",
    "tokenize",
    "count_tokens",
    "get_response_text",
    "get_random_response_text",
    "InvalidBudgetError",
    "resolve_max_tokens",
    "ContextWindowCheck",
    "validate_context_window",
]
