"""Seeded random source shared by every randomized decision in the simulator."""

import logging
import threading
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)

# Normal draws are pinned to [NORMAL_CLAMP_LOW * mean, NORMAL_CLAMP_HIGH * mean]
NORMAL_CLAMP_LOW = 0.3
NORMAL_CLAMP_HIGH = 1.7

DIGITS = "0123456789"

# Seeds are signed 64-bit values; SeedSequence needs non-negative entropy
SEED_MASK = 0xFFFFFFFFFFFFFFFF


class RandomSource:
    """Single seeded random stream with serialized access.

    All draws go through one ``numpy.random.Generator``, so a fixed seed and a
    stable call order reproduce the same sequence of decisions. Draws are
    guarded by a lock so concurrent request handlers can share one instance.
    Handlers that need reproducibility independent of scheduling order should
    take their own stream from :meth:`spawn` instead.
    """

    def __init__(self, seed: int, spawn_key: Tuple[int, ...] = ()):
        """Initialize the stream.

        Args:
            seed: Master seed for the stream
            spawn_key: Path of worker indices when this stream was derived
                from a parent via :meth:`spawn`
        """
        self.seed = seed
        self.spawn_key = tuple(spawn_key)
        seed_seq = np.random.SeedSequence(entropy=seed & SEED_MASK, spawn_key=self.spawn_key)
        self._generator = np.random.Generator(np.random.PCG64(seed_seq))
        self._lock = threading.Lock()

        logger.debug(f"RandomSource initialized (seed={seed}, spawn_key={self.spawn_key})")

    def spawn(self, worker_index: int) -> "RandomSource":
        """Derive an independent stream for a worker.

        The child depends only on the master seed and the worker index, never
        on how many draws the parent has made.
        """
        if worker_index < 0:
            raise ValueError(f"worker_index must be non-negative, got {worker_index}")
        return RandomSource(self.seed, self.spawn_key + (worker_index,))

    def int_in_range(self, min_value: int, max_value: int) -> int:
        """Return an integer uniformly drawn from [min_value, max_value]."""
        if max_value < min_value:
            raise ValueError(f"Invalid range: max {max_value} is less than min {min_value}")
        with self._lock:
            return int(self._generator.integers(min_value, max_value, endpoint=True))

    def flip_coin(self) -> bool:
        return self.int_in_range(0, 1) != 0

    def bool_with_probability(self, probability: int) -> bool:
        """Return True with the given probability.

        Args:
            probability: Integer percentage between 0 and 100
        """
        if not 0 <= probability <= 100:
            raise ValueError(f"probability must be between 0 and 100, got {probability}")
        with self._lock:
            return float(self._generator.random()) < probability / 100

    def float_in_range(self, min_value: float, max_value: float) -> float:
        """Return a float uniformly drawn from [min_value, max_value)."""
        with self._lock:
            return float(self._generator.random()) * (max_value - min_value) + min_value

    def normal(self, mean: float, stddev: float) -> float:
        """Draw from a normal distribution, clamped around the mean.

        A zero ``stddev`` returns ``mean`` without consuming a draw. Otherwise
        values further than 70% from the mean are pinned to the nearest bound
        rather than resampled.

        Args:
            mean: Center of the distribution
            stddev: Standard deviation

        Returns:
            Value within [0.3 * mean, 1.7 * mean]
        """
        if stddev == 0:
            return mean

        with self._lock:
            value = float(self._generator.standard_normal()) * stddev + mean

        if value < NORMAL_CLAMP_LOW * mean:
            value = NORMAL_CLAMP_LOW * mean
        elif value > NORMAL_CLAMP_HIGH * mean:
            value = NORMAL_CLAMP_HIGH * mean
        return value

    def random_numeric_string(self, length: int) -> str:
        """Build a string of ``length`` random decimal digits."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return "".join(DIGITS[self.int_in_range(0, 9)] for _ in range(length))
