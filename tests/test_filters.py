from pathlib import Path

from core.data_structures import SearchConfig
from core.filters import FilterSet


def test_empty_filters_accept_everything(tmp_path):
    filters = FilterSet()
    assert filters.accepts_file(tmp_path / "anything.bin")
    assert filters.accepts_file(tmp_path / "no_extension")


def test_filename_match_is_case_insensitive(tmp_path):
    filters = FilterSet(exclusive_filenames={"README.md"})
    assert filters.accepts_file(tmp_path / "readme.MD")
    assert not filters.accepts_file(tmp_path / "readme.txt")


def test_stem_match_ignores_extension(tmp_path):
    filters = FilterSet(exclusive_file_stems={"Report"})
    assert filters.accepts_file(tmp_path / "report.pdf")
    assert filters.accepts_file(tmp_path / "REPORT.docx")
    assert not filters.accepts_file(tmp_path / "report2.pdf")


def test_stem_uses_final_extension_only(tmp_path):
    filters = FilterSet(exclusive_file_stems={"archive.tar"})
    assert filters.accepts_file(tmp_path / "archive.tar.gz")


def test_extension_forms_are_equivalent(tmp_path):
    for ext in (".mp3", "mp3", " .MP3 "):
        filters = FilterSet(exclusive_extensions={ext})
        assert filters.accepts_file(tmp_path / "song.mp3")
        assert filters.accepts_file(tmp_path / "song.Mp3")
        assert not filters.accepts_file(tmp_path / "song.wav")


def test_extension_filter_rejects_files_without_extension(tmp_path):
    filters = FilterSet(exclusive_extensions={"mp3"})
    assert not filters.accepts_file(tmp_path / "Makefile")


def test_blank_values_are_discarded():
    filters = FilterSet(exclusive_filenames={"", "  "}, exclusive_extensions={" ", "."})
    assert filters.exclusive_filenames == frozenset()
    assert filters.exclusive_extensions == frozenset()


def test_all_criteria_must_hold(tmp_path):
    filters = FilterSet(exclusive_file_stems={"song"}, exclusive_extensions={"mp3"})
    assert filters.accepts_file(tmp_path / "song.mp3")
    assert not filters.accepts_file(tmp_path / "song.wav")
    assert not filters.accepts_file(tmp_path / "other.mp3")


def test_excluded_directory_by_parent_and_by_itself(tmp_path):
    skip = tmp_path / "skip"
    skip.mkdir()
    filters = FilterSet(exclude_directories={str(skip)})
    assert filters.is_excluded_directory(skip.resolve())
    assert filters.is_excluded_directory(skip.resolve() / "y.txt", is_file=True)
    assert not filters.is_excluded_directory(tmp_path.resolve())
    assert not filters.accepts_file(skip.resolve() / "y.txt")


def test_excluded_directory_only_checks_immediate_parent(tmp_path):
    skip = tmp_path / "skip"
    (skip / "deeper").mkdir(parents=True)
    filters = FilterSet(exclude_directories={str(skip)})
    assert not filters.is_excluded_directory(skip.resolve() / "deeper" / "z.txt", is_file=True)


def test_relative_excluded_directory_uses_base(tmp_path):
    (tmp_path / "skip").mkdir()
    filters = FilterSet(exclude_directories={"skip"}, base=tmp_path.resolve())
    assert filters.exclude_dirs == frozenset({(tmp_path / "skip").resolve()})


def test_excluded_directory_is_canonicalized(tmp_path):
    (tmp_path / "skip").mkdir()
    filters = FilterSet(exclude_directories={str(tmp_path / "skip" / ".." / "skip")})
    assert filters.is_excluded_directory((tmp_path / "skip").resolve())


def test_empty_path_is_not_matching():
    assert not FilterSet().accepts_file(Path(""))


def test_from_config():
    config = SearchConfig(
        exclusive_filenames=frozenset({"A.TXT"}),
        exclusive_file_stems=frozenset({"A"}),
        exclusive_extensions=frozenset({"TXT"}),
    )
    filters = FilterSet.from_config(config)
    assert filters.exclusive_filenames == frozenset({"a.txt"})
    assert filters.exclusive_file_stems == frozenset({"a"})
    assert filters.exclusive_extensions == frozenset({".txt"})
