"""Completion simulator tying the core components together."""

import logging
from typing import List, Optional

from .accounting import resolve_max_tokens, validate_context_window
from .config import SimulatorConfig
from .core import LatencyModel, RandomSource
from .models import CompletionResult
from .text import ResponseCorpus, get_response_text

logger = logging.getLogger(__name__)

REQUEST_ID_PREFIX = "chatcmpl-"
REQUEST_ID_DIGITS = 16


class CompletionSimulator:
    """Main entry point for producing simulated completions.

    Owns the random source, the response corpus and the latency model built
    from a :class:`SimulatorConfig`. A serving layer creates one instance at
    startup and calls :meth:`complete` per request with already-parsed limits.
    """

    def __init__(
        self,
        config: Optional[SimulatorConfig] = None,
        random_source: Optional[RandomSource] = None,
        corpus: Optional[ResponseCorpus] = None,
    ):
        """Initialize the simulator.

        Args:
            config: Simulator configuration; defaults are used if None
            random_source: Stream to draw from; a new one seeded from the
                config is created if None
            corpus: Response corpus; built from the config if None
        """
        self.config = config if config is not None else SimulatorConfig()
        self.random_source = (
            random_source if random_source is not None else RandomSource(self.config.seed)
        )
        self.corpus = corpus if corpus is not None else ResponseCorpus(self.config.corpus_responses())
        self.latency_model = LatencyModel(self.config.latency.to_profile(), self.random_source)

        logger.info(
            f"CompletionSimulator initialized (seed={self.config.seed}, "
            f"max_model_len={self.config.max_model_len}, responses={len(self.corpus)})"
        )

    def spawn_worker(self, worker_index: int) -> "CompletionSimulator":
        """Create a simulator drawing from an independent per-worker stream.

        The worker shares configuration and corpus with this simulator; its
        random decisions depend only on the seed and ``worker_index``.
        """
        return CompletionSimulator(
            self.config,
            random_source=self.random_source.spawn(worker_index),
            corpus=self.corpus,
        )

    def complete(
        self,
        prompt_tokens: int,
        max_completion_tokens: Optional[int] = None,
        max_tokens: Optional[int] = None,
        text: Optional[str] = None,
    ) -> CompletionResult:
        """Simulate one completion.

        Args:
            prompt_tokens: Number of tokens in the prompt
            max_completion_tokens: Requested max_completion_tokens, if any
            max_tokens: Requested max_tokens, if any
            text: Source text to emit; a random canned response if None

        Returns:
            CompletionResult. Rejected requests carry either ``error`` or a
            failing ``context_check`` and no text; no random draw is made
            for them.
        """
        result = CompletionResult(prompt_tokens=prompt_tokens)

        budget, error = resolve_max_tokens(max_completion_tokens, max_tokens)
        if error is not None:
            result.error = error
            logger.debug(f"Rejected request: {error}")
            return result
        result.effective_budget = budget

        result.context_check = validate_context_window(
            prompt_tokens, budget, self.config.max_model_len
        )
        if not result.context_check.is_valid:
            logger.debug(
                f"Rejected request: {result.context_check.total_tokens} tokens exceed "
                f"max_model_len {self.config.max_model_len}"
            )
            return result

        if text is None:
            text = self.corpus.random_response(self.random_source)
        result.text, result.finish_reason = get_response_text(budget, text)
        result.completion_tokens = len(result.text.split())

        logger.debug(
            f"Completed request: {result.completion_tokens} tokens, "
            f"finish_reason={result.finish_reason.value}"
        )
        return result

    def recover_full_text(self, partial: str) -> Optional[str]:
        """Find the canned response a previously emitted fragment came from."""
        return self.corpus.find_containing(partial)

    def token_delays(self, num_tokens: int) -> List[float]:
        """Sample streaming delays, in milliseconds, for ``num_tokens`` tokens."""
        return self.latency_model.token_delays(num_tokens)

    def generate_request_id(self) -> str:
        return REQUEST_ID_PREFIX + self.random_source.random_numeric_string(REQUEST_ID_DIGITS)
