"""Base classes for split strategies."""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from lancet.exceptions import LancetTokenizationError
from lancet.models import Chunk


class SplitStrategy(ABC):
    """Base class for all split strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name for logging and metrics."""
        pass

    @abstractmethod
    def split(self, text: str) -> List[Chunk]:
        """Split text into chunks.

        Args:
            text: Document text, possibly empty

        Returns:
            Chunks in document order
        """
        pass


class TokenizingStrategy(SplitStrategy):
    """Base class for strategies that consult a tokenizer.

    The tokenizer is any object exposing encode(text) and decode(ids).
    Failures are surfaced as LancetTokenizationError carrying the offending
    text or ids; nothing is retried.
    """

    def __init__(self, tokenizer: Any) -> None:
        self._tokenizer = tokenizer

    def _encode(self, text: str) -> List[int]:
        try:
            return list(self._tokenizer.encode(text))
        except LancetTokenizationError:
            raise
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to encode text: '{text}', with error: {e}",
                text=text,
            ) from e

    def _decode(self, ids: Sequence[int]) -> str:
        try:
            return self._tokenizer.decode(list(ids))
        except LancetTokenizationError:
            raise
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to decode tokens: {list(ids)}, with error: {e}",
                ids=ids,
            ) from e

    def _count(self, text: str) -> int:
        return len(self._encode(text))
