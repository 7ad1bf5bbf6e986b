"""Output formatters for Lancet."""

from lancet.output.base import OutputFormatter
from lancet.output.text_formatter import TextFormatter
from lancet.output.json_formatter import JsonFormatter, JsonLinesFormatter

FORMATTERS = {
    "text": TextFormatter,
    "jsonl": JsonLinesFormatter,
    "json": JsonFormatter,
}

__all__ = [
    "OutputFormatter",
    "TextFormatter",
    "JsonFormatter",
    "JsonLinesFormatter",
    "FORMATTERS",
]
