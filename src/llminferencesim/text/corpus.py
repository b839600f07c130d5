"""Canned responses returned in place of real model output."""

from typing import Iterable, Iterator, Optional, Tuple

from ..core.random_source import RandomSource

# Order matters: seeded selection indexes into this tuple
DEFAULT_RESPONSES: Tuple[str, ...] = (
    "Testing@, #testing 1$ ,2%,3^, [4&*5], 6~, 7-_ + (8 : 9) / \\ < > .",
    "Testing, testing 1,2,3.",
    "I am fine, how are you today?",
    "I am your AI assistant, how can I help you today?",
    "Today is a nice sunny day.",
    "The temperature here is twenty-five degrees centigrade.",
    "Today it is partially cloudy and raining.",
    "To be or not to be that is the question.",
    "Alas, poor Yorick! I knew him, Horatio: A fellow of infinite jest",
    "The rest is silence. ",
    "Give a man a fish and you feed him for a day; "
    "teach a man to fish and you feed him for a lifetime",
)


class ResponseCorpus:
    """Fixed, ordered collection of canned responses.

    The corpus is immutable after construction and can be shared between
    threads without locking.
    """

    def __init__(self, responses: Iterable[str] = DEFAULT_RESPONSES):
        self._responses: Tuple[str, ...] = tuple(responses)
        if not self._responses:
            raise ValueError("ResponseCorpus requires at least one response")

    @property
    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def __len__(self) -> int:
        return len(self._responses)

    def __iter__(self) -> Iterator[str]:
        return iter(self._responses)

    def __contains__(self, text: object) -> bool:
        return text in self._responses

    def random_response(self, random_source: RandomSource) -> str:
        """Pick a response using one draw from ``random_source``."""
        index = random_source.int_in_range(0, len(self._responses) - 1)
        return self._responses[index]

    def find_containing(self, partial: str) -> Optional[str]:
        """Recover the full response that contains ``partial``.

        The first match in corpus order wins. An empty ``partial`` matches the
        first response.

        Returns:
            The full response, or None if no response contains ``partial``
        """
        for response in self._responses:
            if partial in response:
                return response
        return None
