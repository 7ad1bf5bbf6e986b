"""Chunk model for Lancet."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Chunk:
    """One unit of split output, in document order."""

    content: str
    index: int
    paragraph_index: Optional[int] = None  # None for paragraph-agnostic policies
    token_count: Optional[int] = None  # Only known when the tokenizer was consulted

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "index": self.index,
            "paragraph_index": self.paragraph_index,
            "token_count": self.token_count,
            "content": self.content,
        }

    def __len__(self) -> int:
        """Return the length of the content."""
        return len(self.content)
