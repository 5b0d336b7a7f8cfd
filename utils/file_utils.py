# utils/file_utils.py

"""File and text formatting utilities."""
import os
from pathlib import Path
from typing import Iterable, List, Optional

WHITESPACE = " \t\n\r\f\v"

KB = float(1 << 10)
MB = float(1 << 20)
GB = float(1 << 30)
TB = float(1 << 40)

US = 1_000.0
MS = 1_000_000.0
S = 1_000_000_000.0


def trim(text: str) -> str:
    """Strips leading and trailing whitespace."""
    return text.strip(WHITESPACE)


def normalize_extension(ext: str) -> str:
    """
    Normalizes an extension to lower case with exactly one leading dot.

    ' .MP3 ', 'mp3' and '..mp3' all become '.mp3'. Blank input gives ''.
    """
    ext = trim(ext).lower().lstrip('.')
    if not ext:
        return ""
    return f".{ext}"


def split_values(values: Optional[Iterable[str]]) -> List[str]:
    """Flattens repeated and comma-separated CLI values, dropping blanks."""
    result = []
    for value in values or []:
        for part in str(value).split(','):
            part = trim(part)
            if part:
                result.append(part)
    return result


def format_size(size_bytes: int) -> str:
    """Formats bytes into a human-readable string (B, KB, MB, GB, TB)."""
    size = float(size_bytes)
    if size <= KB:
        return f"{size:.2f} B"
    if size < MB:
        return f"{size / KB:.2f} KB"
    if size < GB:
        return f"{size / MB:.2f} MB"
    if size < TB:
        return f"{size / GB:.2f} GB"
    return f"{size / TB:.2f} TB"


def format_time(nanoseconds: int) -> str:
    """Formats an elapsed time given in nanoseconds (ns, µs, ms, s)."""
    if nanoseconds < US:
        return f"{float(nanoseconds):.2f} ns"
    if nanoseconds < MS:
        return f"{nanoseconds / US:.2f} µs"
    if nanoseconds < S:
        return f"{nanoseconds / MS:.2f} ms"
    return f"{nanoseconds / S:.2f} s"


def get_canonical_path(path) -> Optional[Path]:
    """Resolves symlinks and relative segments; None if the path does not exist."""
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError, ValueError, TypeError):
        return None


def get_directory_entries(directory: Path) -> Optional[List[os.DirEntry]]:
    """Lists the immediate children of a directory; None if it can't be read."""
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError:
        return None


def get_file_size(entry: os.DirEntry) -> Optional[int]:
    """Size of a directory entry without following symlinks."""
    try:
        return entry.stat(follow_symlinks=False).st_size
    except OSError:
        return None
