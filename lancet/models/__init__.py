"""Data models for Lancet."""

from lancet.models.enums import PolicyKind
from lancet.models.policy import (
    Policy,
    SentenceBoundary,
    ParagraphBoundary,
    TokenBounded,
    TokenPacked,
    policy_from_dict,
)
from lancet.models.document import Document
from lancet.models.chunk import Chunk
from lancet.models.result import LancetResult

__all__ = [
    "PolicyKind",
    "Policy",
    "SentenceBoundary",
    "ParagraphBoundary",
    "TokenBounded",
    "TokenPacked",
    "policy_from_dict",
    "Document",
    "Chunk",
    "LancetResult",
]
