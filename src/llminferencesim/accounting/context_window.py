"""Context window check for simulated requests."""

from typing import NamedTuple, Optional


class ContextWindowCheck(NamedTuple):
    is_valid: bool
    completion_tokens: int
    total_tokens: int


def validate_context_window(
    prompt_tokens: int, max_completion_tokens: Optional[int], max_model_len: int
) -> ContextWindowCheck:
    """Check that prompt plus requested completion fits the model length.

    An unset budget counts as zero completion tokens, so only the declared
    request is checked.
    """
    completion_tokens = max_completion_tokens if max_completion_tokens is not None else 0
    total_tokens = prompt_tokens + completion_tokens
    return ContextWindowCheck(
        is_valid=total_tokens <= max_model_len,
        completion_tokens=completion_tokens,
        total_tokens=total_tokens,
    )
