"""Plain text output formatter."""

from typing import List

from lancet.output.base import OutputFormatter
from lancet.models import Chunk

SEPARATOR = "---"


class TextFormatter(OutputFormatter):
    """Chunks as plain text, separated by a horizontal rule."""

    def __init__(self, include_separator: bool = True) -> None:
        """Initialize the text formatter.

        Args:
            include_separator: Whether to include separators between chunks
        """
        self._include_separator = include_separator

    @property
    def extension(self) -> str:
        return ".txt"

    def format_chunk(self, chunk: Chunk) -> str:
        return chunk.content

    def format_to_string(self, chunks: List[Chunk]) -> str:
        output = []

        for i, chunk in enumerate(chunks):
            output.append(self.format_chunk(chunk))

            # Add separator between chunks (not after the last one)
            if self._include_separator and i < len(chunks) - 1:
                output.append("")
                output.append(SEPARATOR)
                output.append("")

        return "\n".join(output)
