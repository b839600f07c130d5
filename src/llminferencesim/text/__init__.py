"""Canned text, tokenization and truncation."""

from .corpus import DEFAULT_RESPONSES, ResponseCorpus
from .tokenizer import count_tokens, tokenize
from .truncator import FinishReason, get_random_response_text, get_response_text

__all__ = [
    "DEFAULT_RESPONSES",
    "ResponseCorpus",
    "FinishReason",
    "tokenize",
    "count_tokens",
    "get_response_text",
    "get_random_response_text",
]
