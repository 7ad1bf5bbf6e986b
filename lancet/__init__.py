"""
Lancet: Policy-Driven Text Chunking

Split documents into ordered chunks by sentence, by paragraph, or under a
token budget with a sliding window of context sentences.
"""

from lancet.config import LancetConfig
from lancet.lancet import Lancet, LancetBuilder
from lancet.splitter import split, split_chunks
from lancet.models import (
    Policy,
    PolicyKind,
    SentenceBoundary,
    ParagraphBoundary,
    TokenBounded,
    TokenPacked,
    policy_from_dict,
    Document,
    Chunk,
    LancetResult,
)
from lancet.tokenization import (
    Tokenizer,
    TiktokenTokenizer,
    HuggingFaceTokenizer,
    create_tokenizer,
)
from lancet.exceptions import (
    LancetError,
    LancetConfigError,
    LancetTokenizationError,
    LancetParseError,
)

__version__ = "1.0.0"
__all__ = [
    # Main entry points
    "split",
    "split_chunks",
    "Lancet",
    "LancetBuilder",
    "LancetConfig",
    # Policies
    "Policy",
    "PolicyKind",
    "SentenceBoundary",
    "ParagraphBoundary",
    "TokenBounded",
    "TokenPacked",
    "policy_from_dict",
    # Models
    "Document",
    "Chunk",
    "LancetResult",
    # Tokenizers
    "Tokenizer",
    "TiktokenTokenizer",
    "HuggingFaceTokenizer",
    "create_tokenizer",
    # Exceptions
    "LancetError",
    "LancetConfigError",
    "LancetTokenizationError",
    "LancetParseError",
]
