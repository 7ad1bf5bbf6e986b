"""Sentence and word segmentation using Unicode default boundaries (UAX #29).

The rules are locale-independent and carry no abbreviation dictionary, so
"Dr. Smith" is split after "Dr.". Both functions are pure and total.
"""

from typing import List

from uniseg.sentencebreak import sentences as _sentence_segments
from uniseg.wordbreak import words as _word_segments


def _has_alnum(segment: str) -> bool:
    return any(char.isalnum() for char in segment)


def sentences(text: str) -> List[str]:
    """Split text into trimmed sentences.

    Whitespace-only segments (for example the line breaks between
    paragraphs) are dropped; every other segment is kept, so no visible text
    is lost.

    Args:
        text: Text to segment

    Returns:
        Sentences in document order; empty for empty or whitespace-only text
    """
    if not text:
        return []

    result: List[str] = []
    for segment in _sentence_segments(text):
        sentence = segment.strip()
        if sentence:
            result.append(sentence)
    return result


def words(text: str) -> List[str]:
    """Split text into whitespace-delimited words on UAX #29 word boundaries.

    Whitespace segments separate words and are discarded. Punctuation and
    symbol segments stay attached to the characters around them, so
    "(e-mail," is one word. Two letter or digit segments that touch with
    nothing in between (scripts written without spaces, such as Chinese)
    become separate words. Joining the result with single spaces
    reconstructs the text up to whitespace normalization.

    Args:
        text: Text to segment, typically a single sentence

    Returns:
        Words in order; empty for empty or whitespace-only text
    """
    result: List[str] = []
    current = ""
    previous = ""

    for segment in _word_segments(text):
        if segment.isspace():
            if current:
                result.append(current)
            current = previous = ""
            continue

        if current and _has_alnum(previous) and _has_alnum(segment):
            result.append(current)
            current = ""

        current += segment
        previous = segment

    if current:
        result.append(current)

    return result
