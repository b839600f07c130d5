"""Data models for simulated completions."""

from dataclasses import dataclass
from typing import Optional

from .accounting import ContextWindowCheck, InvalidBudgetError
from .text import FinishReason


@dataclass
class CompletionResult:
    """Outcome of one simulated completion request.

    ``completion_tokens`` counts the whitespace-separated words emitted, the
    same unit the completion budget is enforced in. It is not comparable with
    prompt counts taken from :func:`llminferencesim.text.count_tokens`.
    """

    prompt_tokens: int
    effective_budget: Optional[int] = None
    context_check: Optional[ContextWindowCheck] = None
    text: str = ""
    finish_reason: Optional[FinishReason] = None
    completion_tokens: int = 0
    error: Optional[InvalidBudgetError] = None

    @property
    def is_rejected(self) -> bool:
        """True if the request should be refused by the serving layer."""
        if self.error is not None:
            return True
        return self.context_check is not None and not self.context_check.is_valid
