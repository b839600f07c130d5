"""
Unit tests for latency sampling.
"""

from llminferencesim.core.latency import LatencyModel, LatencyProfile
from llminferencesim.core.random_source import RandomSource


class TestLatencyModel:
    """Test time-to-first-token and inter-token latency sampling."""

    def test_fixed_profile(self):
        """Test that zero spread gives exact timings without consuming draws."""
        source = RandomSource(1)
        reference = RandomSource(1)
        model = LatencyModel(
            LatencyProfile(time_to_first_token_ms=150.0, inter_token_latency_ms=10.0),
            source,
        )

        assert model.token_delays(4) == [150.0, 10.0, 10.0, 10.0]
        assert source.int_in_range(0, 10**9) == reference.int_in_range(0, 10**9)

    def test_no_tokens(self):
        model = LatencyModel(LatencyProfile(time_to_first_token_ms=5.0), RandomSource(1))
        assert model.token_delays(0) == []

    def test_varied_profile_stays_clamped(self):
        profile = LatencyProfile(
            time_to_first_token_ms=100.0,
            time_to_first_token_std_ms=80.0,
            inter_token_latency_ms=20.0,
            inter_token_latency_std_ms=15.0,
        )
        model = LatencyModel(profile, RandomSource(42))

        delays = model.token_delays(200)
        assert len(delays) == 200
        assert 30.0 - 1e-9 <= delays[0] <= 170.0 + 1e-9
        assert all(6.0 - 1e-9 <= d <= 34.0 + 1e-9 for d in delays[1:])

    def test_reproducible(self):
        profile = LatencyProfile(
            time_to_first_token_ms=100.0,
            time_to_first_token_std_ms=10.0,
            inter_token_latency_ms=20.0,
            inter_token_latency_std_ms=2.0,
        )
        first = LatencyModel(profile, RandomSource(8)).token_delays(10)
        second = LatencyModel(profile, RandomSource(8)).token_delays(10)
        assert first == second
