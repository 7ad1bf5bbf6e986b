"""Tokenizer backed by a Hugging Face `tokenizers.Tokenizer`."""

from typing import Any, List, Sequence

from lancet.exceptions import LancetConfigError, LancetTokenizationError
from lancet.tokenization.base import Tokenizer


def _load_tokenizer_class():
    try:
        from tokenizers import Tokenizer as HFTokenizer
    except ImportError:
        raise ImportError(
            "tokenizers is not installed. Install it with: pip install tokenizers"
        )
    return HFTokenizer


class HuggingFaceTokenizer(Tokenizer):
    """Adapter over a Hugging Face tokenizer."""

    def __init__(
        self,
        tokenizer: Any,
        add_special_tokens: bool = True,
        skip_special_tokens: bool = True,
    ) -> None:
        """Initialize the adapter.

        Args:
            tokenizer: A `tokenizers.Tokenizer` instance
            add_special_tokens: Count special tokens (BOS, CLS, ...) added on encode
            skip_special_tokens: Drop special tokens when decoding
        """
        self._tokenizer = tokenizer
        self._add_special_tokens = add_special_tokens
        self._skip_special_tokens = skip_special_tokens

    @classmethod
    def from_pretrained(cls, identifier: str, **kwargs: Any) -> "HuggingFaceTokenizer":
        """Load a tokenizer from the Hugging Face Hub.

        Args:
            identifier: Model repository id, e.g. "TinyLlama/TinyLlama-1.1B-Chat-v1.0"
            **kwargs: Passed to the adapter constructor

        Raises:
            LancetConfigError: If the tokenizer cannot be loaded
        """
        hf_tokenizer_class = _load_tokenizer_class()
        try:
            tokenizer = hf_tokenizer_class.from_pretrained(identifier)
        except Exception as e:
            raise LancetConfigError(
                f"Failed to load tokenizer '{identifier}': {e}",
                "tokenizer_model",
            ) from e
        return cls(tokenizer, **kwargs)

    @classmethod
    def from_file(cls, path: str, **kwargs: Any) -> "HuggingFaceTokenizer":
        """Load a tokenizer from a local tokenizer.json file.

        Raises:
            LancetConfigError: If the file cannot be loaded
        """
        hf_tokenizer_class = _load_tokenizer_class()
        try:
            tokenizer = hf_tokenizer_class.from_file(path)
        except Exception as e:
            raise LancetConfigError(
                f"Failed to load tokenizer file '{path}': {e}",
                "tokenizer_model",
            ) from e
        return cls(tokenizer, **kwargs)

    def encode(self, text: str) -> List[int]:
        try:
            encoding = self._tokenizer.encode(
                text, add_special_tokens=self._add_special_tokens
            )
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to encode text: '{text}', with error: {e}",
                text=text,
            ) from e
        return list(encoding.ids)

    def decode(self, ids: Sequence[int]) -> str:
        try:
            return self._tokenizer.decode(
                list(ids), skip_special_tokens=self._skip_special_tokens
            )
        except Exception as e:
            raise LancetTokenizationError(
                f"Failed to decode tokens: {list(ids)}, with error: {e}",
                ids=ids,
            ) from e
