"""Punctuation-aware tokenizer used for simulated token accounting.

This is a stand-in for a model vocabulary: a token is either a single symbol
or a run of word characters, and owns the whitespace that follows it.
"""

import re
from typing import List

# Symbols come before \w+ in the alternation so a leading "_" is its own token
TOKEN_PATTERN = re.compile(
    r'(\{|\}|:|,|-|\.|\?|!|;|@|#|\$|%|\^|&|\*|\(|\)|\+|_|~|/|\\|>|<|\[|\]|=|"|\w+)(\s*)',
    re.ASCII,
)


def tokenize(text: str) -> List[str]:
    """Split text into tokens, each with its trailing whitespace attached.

    Characters outside the token grammar are dropped.

    Args:
        text: Text to split

    Returns:
        Ordered list of token strings (empty for empty text)
    """
    return [match.group(0) for match in TOKEN_PATTERN.finditer(text)]


def count_tokens(text: str) -> int:
    """Return the number of simulated tokens in ``text``."""
    return len(tokenize(text))
