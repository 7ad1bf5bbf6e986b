"""Split policies: the strategy and numeric parameters used to chunk a document."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from lancet.exceptions import LancetConfigError
from lancet.models.enums import PolicyKind

DEFAULT_MAX_TOKENS = 512
DEFAULT_CONTEXT_SENTENCES = 1


def _require_int(value: Any, key: str, minimum: int) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise LancetConfigError(
            f"{key} must be an integer, got {type(value).__name__}", key
        )
    if value < minimum:
        raise LancetConfigError(f"{key} must be >= {minimum}, got {value}", key)


@dataclass(frozen=True)
class SentenceBoundary:
    """One chunk per sentence."""

    kind = PolicyKind.SENTENCE
    requires_tokenizer = False

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class ParagraphBoundary:
    """One chunk per blank-line separated paragraph, empties included."""

    kind = PolicyKind.PARAGRAPH
    requires_tokenizer = False

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class TokenBounded:
    """Chunks bounded by a token budget, each carrying preceding sentences as context.

    Attributes:
        max_tokens: Inclusive upper bound on a chunk's encoded length
        context_sentences: Number of preceding sentences of the same
            paragraph to prepend to every chunk
    """

    max_tokens: int = DEFAULT_MAX_TOKENS
    context_sentences: int = DEFAULT_CONTEXT_SENTENCES

    kind = PolicyKind.TOKEN
    requires_tokenizer = True

    def __post_init__(self) -> None:
        _require_int(self.max_tokens, "max_tokens", 1)
        _require_int(self.context_sentences, "context_sentences", 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "max_tokens": self.max_tokens,
            "context_sentences": self.context_sentences,
        }


@dataclass(frozen=True)
class TokenPacked:
    """Words greedily packed into chunks of at most max_tokens token ids.

    Chunk text is rendered by decoding the packed ids, so it may differ from
    the source text for input the tokenizer does not round-trip.
    """

    max_tokens: int = DEFAULT_MAX_TOKENS

    kind = PolicyKind.TOKEN_PACKED
    requires_tokenizer = True

    def __post_init__(self) -> None:
        _require_int(self.max_tokens, "max_tokens", 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "max_tokens": self.max_tokens}


Policy = Union[SentenceBoundary, ParagraphBoundary, TokenBounded, TokenPacked]


def policy_from_dict(data: Mapping[str, Any]) -> Policy:
    """Build a policy from its dictionary form.

    Args:
        data: Mapping with a "kind" key and the policy's parameters

    Returns:
        Policy instance

    Raises:
        LancetConfigError: If the kind is unknown or parameters are invalid
    """
    if "kind" not in data:
        raise LancetConfigError("Policy mapping is missing 'kind'", "kind")

    kind = PolicyKind.from_string(data["kind"])

    if kind == PolicyKind.SENTENCE:
        return SentenceBoundary()
    if kind == PolicyKind.PARAGRAPH:
        return ParagraphBoundary()
    if kind == PolicyKind.TOKEN:
        return TokenBounded(
            max_tokens=data.get("max_tokens", DEFAULT_MAX_TOKENS),
            context_sentences=data.get(
                "context_sentences", DEFAULT_CONTEXT_SENTENCES
            ),
        )
    return TokenPacked(max_tokens=data.get("max_tokens", DEFAULT_MAX_TOKENS))
