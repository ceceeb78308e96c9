"""File reading infrastructure."""

from pathlib import Path
from typing import Protocol

from fqdnkit.domain.exceptions import FileOperationException


class FileReader(Protocol):
    """Protocol for file reading operations."""

    def read_lines(self, path: str) -> list[str]:
        """Read lines from file."""
        ...


class TextFileReader:
    """
    Reads text files containing one domain name per line.

    Blank lines and `#` comments are skipped.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize file reader.

        Args:
            encoding: Text encoding (default: utf-8)
        """
        self.encoding = encoding

    def read_lines(self, path: str) -> list[str]:
        """
        Read and clean lines from a text file.

        Args:
            path: Path to input file

        Returns:
            List of non-empty, stripped lines

        Raises:
            FileOperationException: If file cannot be read
        """
        file_path = Path(path)

        if not file_path.exists():
            raise FileOperationException(f"File not found: {path}")

        if not file_path.is_file():
            raise FileOperationException(f"Not a file: {path}")

        try:
            with file_path.open("r", encoding=self.encoding) as f:
                lines = [line.strip() for line in f]
        except UnicodeDecodeError as e:
            raise FileOperationException(
                f"Encoding error in {path}: {e}. Expected {self.encoding}."
            ) from e
        except OSError as e:
            raise FileOperationException(f"Error reading {path}: {e}") from e

        lines = [line for line in lines if line and not line.startswith("#")]
        if not lines:
            raise FileOperationException(f"File is empty: {path}")

        return lines
