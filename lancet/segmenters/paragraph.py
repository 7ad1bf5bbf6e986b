"""Paragraph splitting on blank-line delimiters."""

from typing import List

PARAGRAPH_DELIMITER = "\n\n"


def paragraphs(text: str) -> List[str]:
    """Split text on the blank-line delimiter.

    Segments are trimmed but never filtered: "\\n\\n\\n" yields two empty
    paragraphs and "   " yields one. The empty string is the exception: it
    has no paragraphs at all and yields [] rather than [""], so every policy
    agrees that an empty document produces no chunks.

    Args:
        text: Text to split

    Returns:
        Trimmed paragraphs in document order
    """
    if not text:
        return []
    return [segment.strip() for segment in text.split(PARAGRAPH_DELIMITER)]
