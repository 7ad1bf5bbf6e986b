"""Tokenizer adapters for Lancet."""

import os

from lancet.exceptions import LancetConfigError
from lancet.tokenization.base import Tokenizer
from lancet.tokenization.tiktoken_tokenizer import TiktokenTokenizer
from lancet.tokenization.huggingface import HuggingFaceTokenizer

BACKENDS = ("tiktoken", "huggingface")


def create_tokenizer(backend: str = "tiktoken", model: str = "gpt-4") -> Tokenizer:
    """Create a tokenizer for a configured backend.

    Args:
        backend: "tiktoken" or "huggingface"
        model: tiktoken model/encoding name, or a Hugging Face repository id
            or path to a tokenizer.json file

    Returns:
        Tokenizer instance

    Raises:
        LancetConfigError: If the backend is unknown
    """
    if backend == "tiktoken":
        return TiktokenTokenizer(model=model)
    if backend == "huggingface":
        if os.path.isfile(model):
            return HuggingFaceTokenizer.from_file(model)
        return HuggingFaceTokenizer.from_pretrained(model)
    raise LancetConfigError(
        f"Unknown tokenizer backend '{backend}'. Valid backends: {', '.join(BACKENDS)}",
        "tokenizer_backend",
    )


__all__ = [
    "Tokenizer",
    "TiktokenTokenizer",
    "HuggingFaceTokenizer",
    "create_tokenizer",
    "BACKENDS",
]
