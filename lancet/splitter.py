"""Policy dispatch: the single entry point that splits a document into chunks."""

import logging
from typing import Any, List, Optional

from lancet.exceptions import LancetConfigError
from lancet.models import (
    Chunk,
    Policy,
    SentenceBoundary,
    ParagraphBoundary,
    TokenBounded,
    TokenPacked,
)
from lancet.strategies import (
    SplitStrategy,
    SentenceStrategy,
    ParagraphStrategy,
    TokenWindowStrategy,
    TokenPackedStrategy,
)

logger = logging.getLogger(__name__)


def get_strategy(policy: Policy, tokenizer: Optional[Any] = None) -> SplitStrategy:
    """Resolve the strategy implementing a policy.

    Args:
        policy: Split policy
        tokenizer: Object with encode/decode; required by token policies,
            ignored by the others

    Returns:
        Strategy ready to split text

    Raises:
        LancetConfigError: If the policy is unknown or needs a missing tokenizer
    """
    if isinstance(policy, SentenceBoundary):
        return SentenceStrategy()
    if isinstance(policy, ParagraphBoundary):
        return ParagraphStrategy()

    if not isinstance(policy, (TokenBounded, TokenPacked)):
        raise LancetConfigError(
            f"Unsupported policy: {policy!r}",
            "policy",
        )

    if tokenizer is None:
        raise LancetConfigError(
            f"No tokenizer provided for {policy.kind.value} splitting",
            "tokenizer",
        )

    if isinstance(policy, TokenBounded):
        return TokenWindowStrategy(policy, tokenizer)
    return TokenPackedStrategy(policy, tokenizer)


def split_chunks(
    text: str, policy: Policy, tokenizer: Optional[Any] = None
) -> List[Chunk]:
    """Split text into Chunk records under a policy.

    All-or-nothing: a tokenizer failure aborts the whole call and no chunks
    are returned.

    Raises:
        LancetConfigError: Before any segmentation, if the policy is invalid
            or requires a tokenizer that was not supplied
        LancetTokenizationError: If the tokenizer rejects an encode or decode
    """
    strategy = get_strategy(policy, tokenizer)
    logger.debug(f"Splitting {len(text)} characters with strategy: {strategy.name}")
    return strategy.split(text)


def split(text: str, policy: Policy, tokenizer: Optional[Any] = None) -> List[str]:
    """Split text into chunk strings under a policy.

    Args:
        text: Arbitrary text, may be empty
        policy: SentenceBoundary, ParagraphBoundary, TokenBounded or TokenPacked
        tokenizer: Object with encode/decode, required for token policies

    Returns:
        Chunk strings in document order
    """
    return [chunk.content for chunk in split_chunks(text, policy, tokenizer)]
