"""Sentence-boundary strategy."""

from typing import List

from lancet.models import Chunk
from lancet.segmenters import sentences
from lancet.strategies.base import SplitStrategy


class SentenceStrategy(SplitStrategy):
    """One chunk per sentence. Paragraph breaks are not a boundary concept here."""

    @property
    def name(self) -> str:
        return "sentence"

    def split(self, text: str) -> List[Chunk]:
        return [
            Chunk(content=sentence, index=index)
            for index, sentence in enumerate(sentences(text))
        ]
