"""Split strategies for Lancet."""

from lancet.strategies.base import SplitStrategy, TokenizingStrategy
from lancet.strategies.sentence import SentenceStrategy
from lancet.strategies.paragraph import ParagraphStrategy
from lancet.strategies.token_window import TokenWindowStrategy
from lancet.strategies.token_packed import TokenPackedStrategy

__all__ = [
    "SplitStrategy",
    "TokenizingStrategy",
    "SentenceStrategy",
    "ParagraphStrategy",
    "TokenWindowStrategy",
    "TokenPackedStrategy",
]
