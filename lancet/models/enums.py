"""Enumerations for Lancet models."""

from enum import Enum
from typing import Union

from lancet.exceptions import LancetConfigError


class PolicyKind(str, Enum):
    """Splitting strategy selected by a policy."""

    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"
    TOKEN = "token"
    TOKEN_PACKED = "token_packed"

    @classmethod
    def from_string(cls, value: Union[str, "PolicyKind"]) -> "PolicyKind":
        """Convert string to PolicyKind.

        Dashes are accepted in place of underscores ("token-packed").

        Raises:
            LancetConfigError: If the value names no known policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower().replace("-", "_"))
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise LancetConfigError(
                f"Unknown policy '{value}'. Valid policies: {valid}",
                "policy",
            )
