"""Finding receipt files on disk"""
import os
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from .config import settings

HIDDEN_PREFIXES = (".", "@")


def _is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIXES)


def find_files(path: Union[str, Path]) -> List[Path]:
    """
    List the regular files at or below path.

    A file path is returned as is. A directory is searched recursively, following
    symbolic links and skipping hidden entries (names starting with "." or "@").

    Raises:
        FileNotFoundError: if path does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    if not path.is_dir():
        return [path]

    files = []
    visited = set()
    for root, dirs, names in os.walk(path, followlinks=True):
        real_root = os.path.realpath(root)
        if real_root in visited:
            # Symlink loop, this directory was already searched
            dirs[:] = []
            continue
        visited.add(real_root)

        dirs[:] = sorted(d for d in dirs if not _is_hidden(d))
        for name in sorted(names):
            file_path = Path(root) / name
            if not _is_hidden(name) and file_path.is_file():
                files.append(file_path)

    logger.debug(f"Found {len(files)} file(s) under {path}")
    return files


def select_receipts(files: List[Path], extension: Optional[str] = None) -> List[Path]:
    """Keep only files with the receipt extension, warning about the rest."""
    if extension is None:
        extension = settings.receipt_extension

    receipts = []
    for file_path in files:
        if file_path.name.endswith(extension):
            receipts.append(file_path)
        else:
            logger.warning(f"Ignoring file {file_path} because its file extension is not {extension}")
    return receipts


def discover_receipts(path: Union[str, Path], extension: Optional[str] = None) -> List[Path]:
    return select_receipts(find_files(path), extension)
