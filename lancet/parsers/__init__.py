"""Document parsers for Lancet."""

from lancet.parsers.text_parser import TextParser

__all__ = ["TextParser"]
