"""Latency sampling for simulated streaming responses."""

import logging
from dataclasses import dataclass
from typing import List

from .random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class LatencyProfile:
    """Timing characteristics of a simulated model, in milliseconds."""

    time_to_first_token_ms: float = 0.0
    time_to_first_token_std_ms: float = 0.0
    inter_token_latency_ms: float = 0.0
    inter_token_latency_std_ms: float = 0.0


class LatencyModel:
    """Samples per-request delays from a latency profile.

    Every sample is a clamped normal draw from the shared random source, so
    a zero standard deviation yields fixed timings and consumes no draws.
    """

    def __init__(self, profile: LatencyProfile, random_source: RandomSource):
        self.profile = profile
        self.random_source = random_source

    def time_to_first_token(self) -> float:
        """Sample the delay before the first token, in milliseconds."""
        return self.random_source.normal(
            self.profile.time_to_first_token_ms,
            self.profile.time_to_first_token_std_ms,
        )

    def inter_token_latency(self) -> float:
        """Sample the delay between two consecutive tokens, in milliseconds."""
        return self.random_source.normal(
            self.profile.inter_token_latency_ms,
            self.profile.inter_token_latency_std_ms,
        )

    def token_delays(self, num_tokens: int) -> List[float]:
        """Sample the delay preceding each token of a stream.

        Args:
            num_tokens: Number of tokens to be emitted

        Returns:
            List of delays in milliseconds; the first entry is the time to
            first token, the rest are inter-token latencies
        """
        if num_tokens <= 0:
            return []

        delays = [self.time_to_first_token()]
        delays.extend(self.inter_token_latency() for _ in range(num_tokens - 1))

        logger.debug(f"Sampled {num_tokens} token delays, total {sum(delays):.2f}ms")
        return delays
