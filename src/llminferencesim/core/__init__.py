"""Core randomness and timing primitives."""

from .latency import LatencyModel, LatencyProfile
from .random_source import RandomSource

__all__ = ["RandomSource", "LatencyModel", "LatencyProfile"]
