"""Tokenizer backed by tiktoken."""

import logging
from typing import Any, List, Optional, Sequence

from lancet.exceptions import LancetTokenizationError
from lancet.tokenization.base import Tokenizer

logger = logging.getLogger(__name__)

FALLBACK_ENCODING = "cl100k_base"


class TiktokenTokenizer(Tokenizer):
    """Tokenizer using tiktoken encodings."""

    def __init__(self, model: str = "gpt-4", encoding: Optional[Any] = None) -> None:
        """Initialize the tokenizer.

        Args:
            model: Model name (or encoding name) used to resolve the encoding
            encoding: Pre-built tiktoken Encoding; skips lazy resolution
        """
        self._model = model
        self._encoding = encoding  # Lazy loading when None

    @property
    def encoding(self):
        """Lazy load the encoding."""
        if self._encoding is None:
            try:
                import tiktoken
            except ImportError:
                raise ImportError(
                    "tiktoken is not installed. Install it with: pip install tiktoken"
                )
            try:
                self._encoding = tiktoken.encoding_for_model(self._model)
            except KeyError:
                try:
                    self._encoding = tiktoken.get_encoding(self._model)
                except ValueError:
                    # Fallback to cl100k_base for unknown models
                    logger.debug(
                        f"Unknown tiktoken model '{self._model}', using {FALLBACK_ENCODING}"
                    )
                    self._encoding = tiktoken.get_encoding(FALLBACK_ENCODING)
        return self._encoding

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model

    def encode(self, text: str) -> List[int]:
        """Encode text into token ids.

        Text containing special-token markup (e.g. "<|endoftext|>") is
        rejected by tiktoken and surfaces as LancetTokenizationError.
        """
        encoding = self.encoding
        try:
            return list(encoding.encode(text))
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to encode text: '{text}', with error: {e}",
                text=text,
            ) from e

    def decode(self, ids: Sequence[int]) -> str:
        """Decode token ids back into text."""
        encoding = self.encoding
        try:
            return encoding.decode(list(ids))
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to decode tokens: {list(ids)}, with error: {e}",
                ids=ids,
            ) from e
