from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pytest

from lancet.tokenization import Tokenizer

WORD_START = "▁"


@dataclass
class WordTokenizer(Tokenizer):
    """Deterministic, network-free tokenizer.

    One id per whitespace-separated word, or one id per `chars_per_token`
    characters of each word when set. Decoding restores single spaces
    between words.
    """

    chars_per_token: Optional[int] = None
    vocab: Dict[str, int] = field(default_factory=dict)
    encode_calls: int = 0

    def _id(self, piece: str) -> int:
        return self.vocab.setdefault(piece, len(self.vocab))

    def encode(self, text: str) -> List[int]:
        self.encode_calls += 1
        ids: List[int] = []
        for word in text.split():
            size = self.chars_per_token or len(word)
            pieces = [word[i : i + size] for i in range(0, len(word), size)]
            ids.append(self._id(WORD_START + pieces[0]))
            ids.extend(self._id(piece) for piece in pieces[1:])
        return ids

    def decode(self, ids: Sequence[int]) -> str:
        inverse = {value: key for key, value in self.vocab.items()}
        return "".join(inverse[i] for i in ids).replace(WORD_START, " ").strip()


@dataclass
class ExplodingTokenizer(Tokenizer):
    """Rejects any text containing `trigger`; counts encode calls."""

    trigger: str = "BOOM"
    encode_calls: int = 0

    def encode(self, text: str) -> List[int]:
        self.encode_calls += 1
        if self.trigger in text:
            raise ValueError("model rejected input")
        return list(range(len(text.split())))

    def decode(self, ids: Sequence[int]) -> str:
        raise ValueError("invalid ids")


@pytest.fixture
def word_tokenizer() -> WordTokenizer:
    return WordTokenizer()


@pytest.fixture
def dense_tokenizer() -> WordTokenizer:
    """Tokenizer where long words cost one token per four characters."""
    return WordTokenizer(chars_per_token=4)


@pytest.fixture
def exploding_tokenizer() -> ExplodingTokenizer:
    return ExplodingTokenizer()
