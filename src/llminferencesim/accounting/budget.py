"""Resolution of the effective completion-token budget."""

from typing import Optional, Tuple

MAX_COMPLETION_TOKENS = "max_completion_tokens"
MAX_TOKENS = "max_tokens"


class InvalidBudgetError(ValueError):
    """A token limit was supplied with a value below 1."""

    def __init__(self, parameter: str, value: int):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be at least 1, got {value}")


def resolve_max_tokens(
    max_completion_tokens: Optional[int], max_tokens: Optional[int]
) -> Tuple[Optional[int], Optional[InvalidBudgetError]]:
    """Pick the effective completion budget from the two request limits.

    ``max_completion_tokens`` takes precedence whenever it is present, even if
    it is invalid and ``max_tokens`` is valid, matching vLLM.

    Args:
        max_completion_tokens: Value of the max_completion_tokens parameter
        max_tokens: Value of the legacy max_tokens parameter

    Returns:
        Tuple of (effective_budget, error). On success error is None and the
        budget is None when neither limit was given. On failure the budget is
        None and error names the offending parameter.
    """
    if max_completion_tokens is not None:
        parameter, tokens = MAX_COMPLETION_TOKENS, max_completion_tokens
    elif max_tokens is not None:
        parameter, tokens = MAX_TOKENS, max_tokens
    else:
        return None, None

    if tokens < 1:
        return None, InvalidBudgetError(parameter, tokens)
    return tokens, None
