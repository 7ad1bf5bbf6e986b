"""Abstract base class for output formatters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from lancet.models import Chunk


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """Default file extension for this format, including the dot."""
        pass

    @abstractmethod
    def format_chunk(self, chunk: Chunk) -> str:
        """Format a single chunk.

        Args:
            chunk: Chunk to format

        Returns:
            Formatted string representation of the chunk
        """
        pass

    @abstractmethod
    def format_to_string(self, chunks: List[Chunk]) -> str:
        """Format chunks to a string without writing to file.

        Args:
            chunks: List of chunks to format

        Returns:
            Formatted string
        """
        pass

    def format(self, chunks: List[Chunk], output_path: str) -> str:
        """Format chunks and write to output file.

        Args:
            chunks: List of chunks to format
            output_path: Path to write output to

        Returns:
            Path to the written output file
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.format_to_string(chunks), encoding="utf-8")
        return str(path)
