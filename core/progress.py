# core/progress.py

"""Console progress reporting for a running search."""
import sys
import time
from pathlib import Path

from core.data_structures import DEFAULT_PROGRESS_INTERVAL, ProgressSnapshot
from utils.file_utils import format_size, format_time
from utils.i18n import translator as t


class SearchProgress:
    """
    Counters and a status line for one search run.

    The status line is rewritten in place with a carriage return. A shorter
    line is padded with spaces so nothing of the previous one stays visible.
    """

    def __init__(self, stream=None, clock=time.monotonic_ns,
                 interval: int = DEFAULT_PROGRESS_INTERVAL):
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock
        self.interval = max(1, int(interval))
        self.search_counter = 0
        self.match_counter = 0
        self.search_bytes = 0
        self.previous_length = 0
        self.start_time = self.clock()

    def increment_search(self):
        self.search_counter += 1

    def increment_match(self):
        self.match_counter += 1

    def increment_search_bytes(self, size_bytes: int):
        if size_bytes > 0:
            self.search_bytes += size_bytes

    def show_progress(self):
        """Renders every ``interval``-th scanned entry."""
        if self.search_counter % self.interval == 0:
            self.write_progress()

    def show_root_search(self, root: Path):
        self.stream.write(t.get('searching_in', root) + "\n")
        self.stream.flush()

    def finalize(self):
        self.write_progress()
        self.stream.write("\n")
        self.stream.flush()

    def reset(self):
        self.search_counter = 0
        self.match_counter = 0
        self.search_bytes = 0
        self.previous_length = 0
        self.start_time = self.clock()

    def elapsed_ns(self) -> int:
        return max(0, self.clock() - self.start_time)

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(
            matches=self.match_counter,
            searches=self.search_counter,
            search_bytes=self.search_bytes,
            elapsed_ns=self.elapsed_ns(),
        )

    def render_line(self) -> str:
        return (
            f"{t.get('matches')}: {self.match_counter} | "
            f"{t.get('searches')}: {self.search_counter} | "
            f"{t.get('search_size')}: {format_size(self.search_bytes)} | "
            f"{t.get('elapsed_time')}: {format_time(self.elapsed_ns())}"
        )

    def write_progress(self):
        line = self.render_line()
        length = len(line)
        fill = " " * max(0, self.previous_length - length)
        self.stream.write("\r" + line + fill)
        self.stream.flush()
        self.previous_length = length
