"""Plain text document parser."""

from pathlib import Path

from lancet.models import Document
from lancet.exceptions import LancetParseError


class TextParser:
    """Parser for plain text documents."""

    def parse(self, file_path: Path) -> Document:
        """Read a text file into a Document.

        The text is returned verbatim: paragraph and line breaks are
        significant to the splitter and are not normalized here.

        Args:
            file_path: Path to the text file

        Returns:
            Parsed Document model

        Raises:
            LancetParseError: If reading fails
        """
        file_path = Path(file_path)

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            # Try with latin-1 as fallback
            try:
                content = file_path.read_text(encoding="latin-1")
            except Exception as e:
                raise LancetParseError(
                    f"Failed to read text file: {e}",
                    file_path=str(file_path),
                )
        except Exception as e:
            raise LancetParseError(
                f"Failed to read text file: {e}",
                file_path=str(file_path),
            )

        return Document(text=content, filename=file_path.name)
