"""Result models for Lancet."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from lancet.models.chunk import Chunk


@dataclass
class LancetResult:
    """Result of a chunking operation."""

    chunks: List[Chunk]
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def chunk_count(self) -> int:
        """Get the number of chunks."""
        return len(self.chunks)

    @property
    def texts(self) -> List[str]:
        """Get the chunk contents in order."""
        return [chunk.content for chunk in self.chunks]

    @property
    def total_tokens(self) -> int:
        """Get total token count across chunks whose count is known."""
        return sum(c.token_count for c in self.chunks if c.token_count is not None)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def add_metric(self, key: str, value: Any) -> None:
        """Add or update a metric."""
        self.metrics[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chunk_count": self.chunk_count,
            "total_tokens": self.total_tokens,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "metrics": self.metrics,
            "warnings": self.warnings,
        }
