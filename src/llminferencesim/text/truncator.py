"""Turns a canned response and a token budget into emitted text."""

from enum import Enum
from typing import Optional, Tuple

from ..core.random_source import RandomSource
from .corpus import ResponseCorpus


class FinishReason(str, Enum):
    """Why a simulated completion ended."""

    STOP = "stop"
    LENGTH = "length"


def get_response_text(
    max_completion_tokens: Optional[int], text: str
) -> Tuple[str, FinishReason]:
    """Truncate ``text`` to the completion budget.

    The budget is counted in whitespace-separated words. A truncated result is
    rejoined with single spaces, so its spacing may differ from the original
    prefix.

    Args:
        max_completion_tokens: Resolved budget, or None for no limit
        text: Full response text

    Returns:
        Tuple of (emitted_text, finish_reason)
    """
    # Budgets are validated upstream; keep this total anyway
    if max_completion_tokens is not None and max_completion_tokens <= 0:
        return "", FinishReason.LENGTH

    if max_completion_tokens is None:
        return text, FinishReason.STOP

    words = text.split()
    if max_completion_tokens >= len(words):
        return text, FinishReason.STOP

    return " ".join(words[:max_completion_tokens]), FinishReason.LENGTH


def get_random_response_text(
    random_source: RandomSource,
    corpus: ResponseCorpus,
    max_completion_tokens: Optional[int],
) -> Tuple[str, FinishReason]:
    """Pick a random canned response and truncate it to the budget."""
    text = corpus.random_response(random_source)
    return get_response_text(max_completion_tokens, text)
