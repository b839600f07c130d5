"""End-to-end tests for the completion simulator."""

import pytest

from llminferencesim import CompletionSimulator, FinishReason, SimulatorConfig, count_tokens
from llminferencesim.text.corpus import DEFAULT_RESPONSES

SAMPLE_TEXT = "I am fine, how are you today?"


@pytest.fixture
def simulator():
    return CompletionSimulator(SimulatorConfig(seed=42, max_model_len=100))


def test_unbounded_completion(simulator):
    result = simulator.complete(prompt_tokens=10)
    assert not result.is_rejected
    assert result.effective_budget is None
    assert result.text in DEFAULT_RESPONSES
    assert result.finish_reason == FinishReason.STOP
    assert result.context_check.total_tokens == 10
    assert result.completion_tokens == len(result.text.split())


def test_truncated_completion_with_given_text(simulator):
    result = simulator.complete(prompt_tokens=5, max_tokens=3, text=SAMPLE_TEXT)
    assert result.effective_budget == 3
    assert result.text == "I am fine,"
    assert result.finish_reason == FinishReason.LENGTH
    assert result.completion_tokens == 3
    assert result.context_check.total_tokens == 8


def test_invalid_budget_rejected(simulator):
    result = simulator.complete(prompt_tokens=5, max_completion_tokens=0, max_tokens=5)
    assert result.is_rejected
    assert result.error.parameter == "max_completion_tokens"
    assert result.context_check is None
    assert result.text == ""
    assert result.finish_reason is None


def test_context_overflow_rejected(simulator):
    result = simulator.complete(prompt_tokens=90, max_completion_tokens=11)
    assert result.is_rejected
    assert result.error is None
    assert not result.context_check.is_valid
    assert result.context_check.total_tokens == 101
    assert result.text == ""


def test_rejections_consume_no_draws():
    """Test that rejected requests leave the random stream untouched."""
    config = SimulatorConfig(seed=5, max_model_len=10)
    plain = CompletionSimulator(config)
    with_rejections = CompletionSimulator(config)

    with_rejections.complete(prompt_tokens=1, max_tokens=-1)
    with_rejections.complete(prompt_tokens=50, max_tokens=1)

    assert with_rejections.complete(1).text == plain.complete(1).text


def test_same_seed_reproducible():
    first = CompletionSimulator(SimulatorConfig(seed=123))
    second = CompletionSimulator(SimulatorConfig(seed=123))
    assert [first.complete(1, max_tokens=4).text for _ in range(30)] == [
        second.complete(1, max_tokens=4).text for _ in range(30)
    ]


def test_custom_responses():
    simulator = CompletionSimulator(SimulatorConfig(responses=["one two three"]))
    result = simulator.complete(0, max_completion_tokens=2)
    assert result.text == "one two"
    assert result.finish_reason == FinishReason.LENGTH


def test_spawned_workers_reproducible(simulator):
    """Test that worker simulators depend only on seed and worker index."""
    other = CompletionSimulator(SimulatorConfig(seed=42, max_model_len=100))
    simulator.complete(1)

    worker_a = simulator.spawn_worker(2)
    worker_b = other.spawn_worker(2)
    assert worker_a.corpus is simulator.corpus
    assert [worker_a.complete(1).text for _ in range(20)] == [
        worker_b.complete(1).text for _ in range(20)
    ]


def test_recover_full_text(simulator):
    assert simulator.recover_full_text("I am fine,") == SAMPLE_TEXT
    assert simulator.recover_full_text("no such fragment") is None


def test_generate_request_id(simulator):
    request_id = simulator.generate_request_id()
    assert request_id.startswith("chatcmpl-")
    suffix = request_id[len("chatcmpl-"):]
    assert len(suffix) == 16
    assert suffix.isdigit()


def test_token_delays_follow_config():
    config = SimulatorConfig.from_dict({
        "latency": {"time_to_first_token_ms": 200, "inter_token_latency_ms": 5},
    })
    simulator = CompletionSimulator(config)
    assert simulator.token_delays(3) == [200.0, 5.0, 5.0]


def test_completion_tokens_count_words_not_tokenizer_tokens(simulator):
    """Test that emitted counts use the budget unit rather than count_tokens."""
    result = simulator.complete(prompt_tokens=1, max_tokens=3, text=SAMPLE_TEXT)
    assert result.completion_tokens == 3
    assert count_tokens(result.text) == 4


def test_negative_seed_config():
    config = SimulatorConfig.from_dict({"seed": -1})
    first = CompletionSimulator(config)
    second = CompletionSimulator(config)
    assert [first.complete(1).text for _ in range(10)] == [
        second.complete(1).text for _ in range(10)
    ]
