#!/usr/bin/env python3
"""
File Sweep - Entry Point

Walks a directory tree breadth-first and prints every regular file that
passes the name, stem and extension filters, skipping excluded directories.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from core.config import Config
from core.data_structures import DEFAULT_PROGRESS_INTERVAL, SearchConfig
from core.search_logic import FileSearch
from utils.file_utils import split_values
from utils.i18n import translator as t


def build_search_config(args, config: Config) -> SearchConfig:
    """Merges command-line values over the settings file."""
    def merged(key: str, values) -> frozenset:
        return frozenset(config.get_set(key) | set(split_values(values)))

    return SearchConfig(
        root=args.root,
        exclusive_filenames=merged('exclusive_filenames', args.name),
        exclusive_file_stems=merged('exclusive_file_stems', args.stem),
        exclusive_extensions=merged('exclusive_extensions', args.ext),
        exclude_directories=merged('exclude_directories', args.exclude_dir),
        quit_directory_on_match=args.quit_directory_on_match or bool(config.get('quit_directory_on_match')),
        progress_interval=int(config.get('progress_interval') or DEFAULT_PROGRESS_INTERVAL),
    )


def print_results(file_search: FileSearch, files, output: str):
    ordered = sorted(str(path) for path in files)
    if output == 'json':
        stats = file_search.progress.snapshot()
        print(json.dumps({
            "root": str(file_search.root_path) if file_search.root_path else None,
            "files": ordered,
            "stats": stats._asdict(),
        }, indent=2))
        return

    if not ordered:
        print(t.get('no_matches'), file=sys.stderr)
        return
    for path in ordered:
        print(f"[{path}]")
    print(t.get('found_files', len(ordered)), file=sys.stderr)


def run_cli(args) -> int:
    config = Config(args.config, load=not args.no_config)
    lang = args.lang or config.get('language')
    if lang:
        t.set_language(lang)

    search_config = build_search_config(args, config)
    if args.quiet:
        with open(os.devnull, 'w', encoding='utf-8') as sink:
            file_search = FileSearch(search_config, progress_stream=sink)
            files = file_search.search_files()
    else:
        progress_stream = sys.stderr if args.output == 'json' else None
        file_search = FileSearch(search_config, progress_stream=progress_stream)
        files = file_search.search_files()

    if file_search.root_path is None:
        return 1
    print_results(file_search, files, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Breadth-first file search with live progress.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Filters accept repeated flags or comma-separated values.

Examples:
  file-sweep ~/Music --ext mp3,flac
    (Lists all MP3 and FLAC files below ~/Music)

  file-sweep . --name README.md --exclude-dir node_modules --exclude-dir .git
    (Finds README files, never descending into node_modules or .git)

  file-sweep /data --stem report --output json > reports.json
    (Writes the matches and scan statistics as JSON)
"""
    )
    parser.add_argument('root', nargs='?', default=None, help='Directory to search (default: current directory)')
    parser.add_argument('--name', action='append', help='Only files with this exact filename')
    parser.add_argument('--stem', action='append', help='Only files with this name without extension')
    parser.add_argument('--ext', action='append', help='Only files with this extension (e.g. "mp3" or ".mp3")')
    parser.add_argument('--exclude-dir', action='append', help='Never descend into this directory (relative paths start at ROOT)')
    parser.add_argument('--quit-directory-on-match', action='store_true',
                        help='Stop listing a directory after its first match')
    parser.add_argument('--output', choices=['text', 'json'], default='text', help='Output format')
    parser.add_argument('--lang', choices=['en', 'de'], help='Set language for console output')
    parser.add_argument('--config', type=Path, help='Settings file (default: ~/.file_sweep_config.json)')
    parser.add_argument('--no-config', action='store_true', help='Ignore the settings file')
    parser.add_argument('--quiet', action='store_true', help='Hide progress output')

    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        sys.exit(run_cli(args))
    except KeyboardInterrupt:
        print("\n" + t.get('interrupted'), file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
