# File: tests/conftest.py

import io
import os
import sys

import pytest

# 1. Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.i18n import translator


@pytest.fixture(autouse=True)
def english_messages():
    """Console text assertions are written against the English catalogue."""
    previous = translator.current_lang
    translator.set_language('en')
    yield
    translator.set_language(previous)


@pytest.fixture
def progress_stream():
    return io.StringIO()


@pytest.fixture
def music_tree(tmp_path):
    """
    Creates:
    - a.txt
    - b.MP3
    - sub/c.mp3
    """
    root = tmp_path / "music"
    root.mkdir()
    (root / "a.txt").write_text("notes")
    (root / "b.MP3").write_bytes(b"ID3" + b"\x00" * 61)
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.mp3").write_bytes(b"ID3" + b"\x00" * 29)
    return root
