"""Core data structures for the file sweep."""
from enum import Enum
from pathlib import Path
from typing import FrozenSet, NamedTuple, Optional, Union

DEFAULT_PROGRESS_INTERVAL = 500


class EntryKind(Enum):
    """Classification of a node found while listing a directory."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class CandidateEntry(NamedTuple):
    """A directory child being classified; lives for one classification step."""
    path: Path
    kind: EntryKind


class SearchConfig(NamedTuple):
    """Configuration for a single search run.

    Every filter collection is optional; an empty one places no constraint.
    A root of None or "" means the current working directory.
    """
    root: Optional[Union[str, Path]] = None
    exclusive_filenames: FrozenSet[str] = frozenset()
    exclusive_file_stems: FrozenSet[str] = frozenset()
    exclusive_extensions: FrozenSet[str] = frozenset()
    exclude_directories: FrozenSet[str] = frozenset()
    quit_directory_on_match: bool = False
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL


class ProgressSnapshot(NamedTuple):
    """Counters of a search run at one point in time."""
    matches: int
    searches: int
    search_bytes: int
    elapsed_ns: int
