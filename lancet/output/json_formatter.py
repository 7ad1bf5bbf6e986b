"""JSON and JSON Lines output formatters."""

import json
from typing import List

from lancet.output.base import OutputFormatter
from lancet.models import Chunk


class JsonLinesFormatter(OutputFormatter):
    """One JSON object per chunk, one chunk per line."""

    @property
    def extension(self) -> str:
        return ".jsonl"

    def format_chunk(self, chunk: Chunk) -> str:
        return json.dumps(chunk.to_dict(), ensure_ascii=False)

    def format_to_string(self, chunks: List[Chunk]) -> str:
        return "\n".join(self.format_chunk(chunk) for chunk in chunks)


class JsonFormatter(OutputFormatter):
    """All chunks as a single JSON array."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def extension(self) -> str:
        return ".json"

    def format_chunk(self, chunk: Chunk) -> str:
        return json.dumps(chunk.to_dict(), ensure_ascii=False, indent=self._indent)

    def format_to_string(self, chunks: List[Chunk]) -> str:
        return json.dumps(
            [chunk.to_dict() for chunk in chunks],
            ensure_ascii=False,
            indent=self._indent,
        )
