"""Document model for Lancet."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Document:
    """An input document. Never mutated by the splitter."""

    text: str
    filename: Optional[str] = None

    def __len__(self) -> int:
        """Return the length of the text."""
        return len(self.text)
