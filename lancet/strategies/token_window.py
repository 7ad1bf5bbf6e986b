"""Token-bounded strategy with a sliding window of context sentences."""

from collections import deque
import logging
from typing import Any, Deque, List, Optional, Tuple

from lancet.models import Chunk, TokenBounded
from lancet.segmenters import paragraphs, sentences, words
from lancet.strategies.base import TokenizingStrategy

logger = logging.getLogger(__name__)


class TokenWindowStrategy(TokenizingStrategy):
    """Chunks of at most max_tokens, each prefixed by up to
    context_sentences preceding sentences of the same paragraph.

    Per paragraph, sentences are consumed from a FIFO work queue:

    1. The candidate is the context window plus the current sentence.
    2. While the candidate overflows, the earliest context sentence is dropped.
    3. If the sentence alone still overflows, its words are packed greedily
       into one chunk and the unconsumed words are pushed back to the front
       of the queue as a pseudo-sentence, to be processed like any other.

    A single word whose own encoding exceeds max_tokens is emitted alone,
    over budget; it is never broken further.
    """

    def __init__(self, policy: TokenBounded, tokenizer: Any) -> None:
        super().__init__(tokenizer)
        self._max_tokens = policy.max_tokens
        self._context_sentences = policy.context_sentences

    @property
    def name(self) -> str:
        return "token"

    def split(self, text: str) -> List[Chunk]:
        chunks: List[Chunk] = []
        for paragraph_index, paragraph in enumerate(paragraphs(text)):
            self._split_paragraph(paragraph, paragraph_index, chunks)
        return chunks

    def _split_paragraph(
        self, paragraph: str, paragraph_index: int, chunks: List[Chunk]
    ) -> None:
        # Pseudo-sentences carry their already segmented words
        pending: Deque[Tuple[str, Optional[List[str]]]] = deque(
            (sentence, None) for sentence in sentences(paragraph)
        )
        history: Deque[str] = deque(maxlen=self._context_sentences)

        while pending:
            sentence, sentence_words = pending.popleft()
            candidate, token_count = self._fit_window(list(history) + [sentence])

            if candidate is not None:
                chunks.append(
                    Chunk(
                        content=candidate,
                        index=len(chunks),
                        paragraph_index=paragraph_index,
                        token_count=token_count,
                    )
                )
            else:
                logger.debug(
                    f"Sentence of {token_count} tokens exceeds max_tokens="
                    f"{self._max_tokens}; packing words"
                )
                if sentence_words is None:
                    sentence_words = words(sentence)
                remainder = self._pack_words(sentence_words, paragraph_index, chunks)
                if remainder:
                    pending.appendleft((" ".join(remainder), remainder))

            history.append(sentence)

    def _fit_window(self, window: List[str]) -> Tuple[Optional[str], int]:
        """Shrink the window from the front until it fits.

        Args:
            window: Context sentences followed by the current sentence

        Returns:
            (candidate text, token count), or (None, token count of the
            current sentence alone) when even that overflows
        """
        while True:
            candidate = " ".join(window)
            token_count = self._count(candidate)
            if token_count <= self._max_tokens:
                return candidate, token_count
            if len(window) == 1:
                return None, token_count
            window = window[1:]

    def _pack_words(
        self, sentence_words: List[str], paragraph_index: int, chunks: List[Chunk]
    ) -> List[str]:
        """Emit the longest prefix of sentence_words that fits.

        Returns:
            The unconsumed words, empty when all were consumed
        """
        taken: List[str] = []
        token_count = 0

        for word in sentence_words:
            candidate_count = self._count(" ".join(taken + [word]))
            if candidate_count <= self._max_tokens:
                taken.append(word)
                token_count = candidate_count
                continue

            if not taken:
                logger.warning(
                    f"Word of {candidate_count} tokens exceeds max_tokens="
                    f"{self._max_tokens}; emitting it as its own chunk"
                )
                taken.append(word)
                token_count = candidate_count
            break

        chunks.append(
            Chunk(
                content=" ".join(taken),
                index=len(chunks),
                paragraph_index=paragraph_index,
                token_count=token_count,
            )
        )
        return sentence_words[len(taken):]
