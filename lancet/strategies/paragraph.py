"""Paragraph-boundary strategy."""

from typing import List

from lancet.models import Chunk
from lancet.segmenters import paragraphs
from lancet.strategies.base import SplitStrategy


class ParagraphStrategy(SplitStrategy):
    """One chunk per paragraph, passing empty paragraphs through unfiltered."""

    @property
    def name(self) -> str:
        return "paragraph"

    def split(self, text: str) -> List[Chunk]:
        return [
            Chunk(content=paragraph, index=index, paragraph_index=index)
            for index, paragraph in enumerate(paragraphs(text))
        ]
