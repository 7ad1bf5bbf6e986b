"""Text segmenters for Lancet."""

from lancet.segmenters.paragraph import paragraphs, PARAGRAPH_DELIMITER
from lancet.segmenters.unicode import sentences, words

__all__ = ["paragraphs", "sentences", "words", "PARAGRAPH_DELIMITER"]
