"""Token-packed strategy: greedy word packing rendered by decoding token ids."""

import logging
from typing import Any, List

from lancet.models import Chunk, TokenPacked
from lancet.segmenters import paragraphs, sentences, words
from lancet.strategies.base import TokenizingStrategy

logger = logging.getLogger(__name__)


class TokenPackedStrategy(TokenizingStrategy):
    """Pack words across sentence boundaries into chunks of at most max_tokens ids.

    Each word is encoded on its own, with a leading space unless it opens a
    chunk, and its ids are appended to the current chunk. A chunk is flushed
    by decoding its ids when the next word would overflow and at every
    paragraph end.
    """

    def __init__(self, policy: TokenPacked, tokenizer: Any) -> None:
        super().__init__(tokenizer)
        self._max_tokens = policy.max_tokens

    @property
    def name(self) -> str:
        return "token_packed"

    def split(self, text: str) -> List[Chunk]:
        chunks: List[Chunk] = []

        for paragraph_index, paragraph in enumerate(paragraphs(text)):
            ids: List[int] = []

            for sentence in sentences(paragraph):
                for word in words(sentence):
                    word_ids = self._encode(" " + word if ids else word)
                    if len(ids) + len(word_ids) <= self._max_tokens:
                        ids.extend(word_ids)
                        continue

                    if ids:
                        self._flush(ids, paragraph_index, chunks)
                        word_ids = self._encode(word)

                    if len(word_ids) > self._max_tokens:
                        logger.warning(
                            f"Word of {len(word_ids)} tokens exceeds max_tokens="
                            f"{self._max_tokens}; emitting it as its own chunk"
                        )
                        self._flush(word_ids, paragraph_index, chunks)
                        ids = []
                    else:
                        ids = list(word_ids)

            if ids:
                self._flush(ids, paragraph_index, chunks)

        return chunks

    def _flush(self, ids: List[int], paragraph_index: int, chunks: List[Chunk]) -> None:
        chunks.append(
            Chunk(
                content=self._decode(ids).strip(),
                index=len(chunks),
                paragraph_index=paragraph_index,
                token_count=len(ids),
            )
        )
