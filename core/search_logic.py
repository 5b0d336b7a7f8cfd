# core/search_logic.py

"""Breadth-first file search over a directory tree."""
import os
import sys
from collections import deque
from pathlib import Path
from typing import Deque, List, Optional, Set

from tqdm import tqdm

from core.data_structures import CandidateEntry, EntryKind, SearchConfig
from core.filters import FilterSet
from core.progress import SearchProgress
from utils.file_utils import get_canonical_path, get_directory_entries, get_file_size
from utils.i18n import translator as t


def classify_entry(entry: os.DirEntry) -> EntryKind:
    """Classifies a directory entry without following symlinks."""
    try:
        if entry.is_symlink():
            return EntryKind.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        pass
    return EntryKind.OTHER


def warn(message: str):
    tqdm.write(message, file=sys.stderr)


class FileSearch:
    """
    Collects the regular files below a root that pass the configured filters.

    Directories are expanded in breadth-first order from an explicit queue.
    Symlinks are never followed, and a directory is queued at most once per
    run. Unreadable nodes are skipped, so ``search_files`` never raises for
    filesystem conditions.
    """

    def __init__(self, config: Optional[SearchConfig] = None, progress_stream=None):
        self.config = config or SearchConfig()
        self.progress_stream = progress_stream
        self.root_path: Optional[Path] = None
        self.filters: Optional[FilterSet] = None
        self.progress: Optional[SearchProgress] = None

    def get_root_path(self) -> Optional[Path]:
        root = self.config.root
        if root is None or not str(root).strip():
            try:
                root = Path.cwd()
            except OSError:
                return None
        root = Path(root)
        try:
            root = root.expanduser()
        except RuntimeError:
            pass
        root = get_canonical_path(root)
        if root is None or not root.is_dir():
            return None
        return root

    def search_files(self) -> Set[Path]:
        files: Set[Path] = set()
        queue: Deque[Path] = deque()
        seen_dirs: Set[Path] = set()
        self.progress = SearchProgress(self.progress_stream, interval=self.config.progress_interval)

        self.root_path = self.get_root_path()
        if self.root_path is None:
            warn(t.get('root_unreachable', self.config.root or os.curdir))
        else:
            self.filters = FilterSet.from_config(self.config, base=self.root_path)
            self.progress.show_root_search(self.root_path)
            queue.append(self.root_path)
            seen_dirs.add(self.root_path)

            while queue:
                directory = queue.popleft()
                for sub_dir in self.walker(directory, files):
                    if sub_dir not in seen_dirs:
                        seen_dirs.add(sub_dir)
                        queue.append(sub_dir)

        self.progress.finalize()
        return files

    def walker(self, directory: Path, files: Set[Path]) -> List[Path]:
        """Scans one directory and returns the sub-directories it contains."""
        sub_directories: List[Path] = []
        if self.filters.is_excluded_directory(directory):
            return sub_directories

        entries = get_directory_entries(directory)
        if entries is None:
            warn(t.get('directory_unreadable', directory))
            return sub_directories

        # After a match with quit_directory_on_match, the remaining files are
        # skipped but sub-directories are still collected.
        quit_files = False
        for entry in entries:
            candidate = self.get_candidate(entry)
            if candidate is None:
                continue
            if candidate.kind is EntryKind.FILE:
                if quit_files:
                    continue
                is_match = self.handle_file(entry, candidate.path, files)
                quit_files = is_match and self.config.quit_directory_on_match
            else:
                self.progress.increment_search()
                self.progress.show_progress()
                sub_directories.append(candidate.path)

        return sub_directories

    def get_candidate(self, entry: os.DirEntry) -> Optional[CandidateEntry]:
        kind = classify_entry(entry)
        if kind not in (EntryKind.FILE, EntryKind.DIRECTORY):
            return None
        path = get_canonical_path(entry.path)
        if path is None:
            return None
        return CandidateEntry(path, kind)

    def handle_file(self, entry: os.DirEntry, path: Path, files: Set[Path]) -> bool:
        self.progress.increment_search()
        size = get_file_size(entry)
        if size is not None:
            self.progress.increment_search_bytes(size)
        self.progress.show_progress()

        if path not in files and self.filters.accepts_file(path):
            files.add(path)
            self.progress.increment_match()
            return True
        return False


def search(config: SearchConfig, progress_stream=None) -> Set[Path]:
    """Runs one search and returns the canonical paths of the matching files."""
    return FileSearch(config, progress_stream).search_files()
