# core/filters.py

"""Inclusion filters and directory exclusion applied during a search."""
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from core.data_structures import SearchConfig
from utils.file_utils import normalize_extension, trim


def _fold_names(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    return frozenset(value.casefold() for value in values or () if trim(value))


def _normalize_extensions(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    exts = (normalize_extension(value) for value in values or ())
    return frozenset(ext for ext in exts if ext)


def _resolve_directories(values: Optional[Iterable[str]], base: Optional[Path]) -> FrozenSet[Path]:
    dirs = set()
    for value in values or ():
        value = trim(str(value))
        if not value:
            continue
        try:
            directory = Path(value).expanduser()
            if not directory.is_absolute() and base is not None:
                directory = base / directory
            dirs.add(directory.resolve())
        except (OSError, RuntimeError, ValueError):
            continue
    return frozenset(dirs)


class FilterSet:
    """
    Matching rules evaluated against candidate paths.

    Filenames and stems compare case-folded. Extensions are normalized to
    lower case with one leading dot. Excluded directories are canonical
    paths; relative ones are taken relative to ``base``.
    """

    def __init__(self, exclusive_filenames: Iterable[str] = (),
                 exclusive_file_stems: Iterable[str] = (),
                 exclusive_extensions: Iterable[str] = (),
                 exclude_directories: Iterable[str] = (),
                 base: Optional[Path] = None):
        self.exclusive_filenames = _fold_names(exclusive_filenames)
        self.exclusive_file_stems = _fold_names(exclusive_file_stems)
        self.exclusive_extensions = _normalize_extensions(exclusive_extensions)
        self.exclude_dirs = _resolve_directories(exclude_directories, base)

    @classmethod
    def from_config(cls, config: SearchConfig, base: Optional[Path] = None) -> 'FilterSet':
        return cls(config.exclusive_filenames, config.exclusive_file_stems,
                   config.exclusive_extensions, config.exclude_directories, base)

    def is_exclusive_filename(self, path: Path) -> bool:
        if not self.exclusive_filenames:
            return True
        name = path.name
        return bool(name) and name.casefold() in self.exclusive_filenames

    def is_exclusive_file_stem(self, path: Path) -> bool:
        if not self.exclusive_file_stems:
            return True
        stem = path.stem
        return bool(stem) and stem.casefold() in self.exclusive_file_stems

    def is_exclusive_extension(self, path: Path) -> bool:
        if not self.exclusive_extensions:
            return True
        ext = normalize_extension(path.suffix)
        return bool(ext) and ext in self.exclusive_extensions

    def is_excluded_directory(self, path: Path, is_file: bool = False) -> bool:
        """A file is excluded through its parent, a directory through itself."""
        if not self.exclude_dirs:
            return False
        directory = path.parent if is_file else path
        return directory in self.exclude_dirs

    def accepts_file(self, path: Path) -> bool:
        """Checks all criteria for a regular file candidate."""
        if not str(path) or not path.name:
            return False
        name_ok = self.is_exclusive_filename(path)
        stem_ok = self.is_exclusive_file_stem(path)
        ext_ok = self.is_exclusive_extension(path)
        return name_ok and stem_ok and ext_ok and not self.is_excluded_directory(path, is_file=True)
