"""Errors raised while reading and parsing receipt files"""
from pathlib import Path
from typing import Optional


class ReceiptParseError(Exception):
    """Base class for everything that makes a receipt file unusable."""

    def __init__(self, path: Optional[Path], message: str):
        self.path = path
        super().__init__(message)


class FileReadError(ReceiptParseError):
    def __init__(self, path: Path, underlying_error: str):
        self.underlying_error = underlying_error
        super().__init__(path, f"Failed to read file {path} - {underlying_error}")


class FileEmptyError(ReceiptParseError):
    def __init__(self, path: Path):
        super().__init__(path, f"File {path} was empty!")


class ReceiptFormatError(ReceiptParseError):
    def __init__(self, path: Optional[Path], problem: str):
        self.problem = problem
        if path is None:
            # Raised for a single line parsed outside of any file
            super().__init__(path, problem)
        else:
            super().__init__(path, f"File {path} was incorrectly formatted! {problem}")
