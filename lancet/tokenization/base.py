"""Abstract base class for tokenizers."""

from abc import ABC, abstractmethod
from typing import List, Sequence


class Tokenizer(ABC):
    """Narrow tokenizer capability consumed by the splitter.

    Only token counts matter to the splitter; ids are never embedded.
    Implementations must treat encode and decode as side-effect-free queries
    so one instance can be shared by concurrent callers.
    """

    @abstractmethod
    def encode(self, text: str) -> List[int]:
        """Encode text into token ids.

        Args:
            text: Text to encode

        Returns:
            Ordered token ids

        Raises:
            LancetTokenizationError: If the underlying model rejects the text
        """
        pass

    @abstractmethod
    def decode(self, ids: Sequence[int]) -> str:
        """Decode token ids back into text.

        Args:
            ids: Token ids to decode

        Returns:
            Decoded text

        Raises:
            LancetTokenizationError: If the ids are invalid
        """
        pass

    def count(self, text: str) -> int:
        """Count tokens in text."""
        return len(self.encode(text))
