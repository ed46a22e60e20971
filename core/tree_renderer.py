# tree_renderer.py
# Recursively prints a directory as a box-drawing tree.
# Hidden entries ('.' prefix) and .gitignore matches are skipped unless show_all.
# Diagnostics go to the error stream, never to the sink.

import os
import sys
from pathlib import Path

from core.ignore_rules import matches_gitignore
from core.output_sink import OutputSink

BRANCH = "├── "
CORNER = "└── "
PIPE = "│  "
SPACE = "    "


def display_name(name: str) -> str:
    """Name as text, with undecodable bytes replaced (U+FFFD) instead of surrogates."""
    return os.fsencode(name).decode("utf-8", "replace")


def list_entries(path: Path, show_all: bool, patterns: list[str], sort_entries: bool = False) -> list[tuple[Path, bool]]:
    """
    List the immediate children of path that should be shown.
    Returns (entry_path, is_dir) pairs. Raises OSError if path can't be listed.
    """
    entries = []
    with os.scandir(path) as it:
        for entry in it:
            name = display_name(entry.name)
            is_hidden = name.startswith(".")
            is_ignored = matches_gitignore(name, patterns)
            if not (show_all or (not is_hidden and not is_ignored)):
                continue
            try:
                is_dir = entry.is_dir()
            except OSError:
                # vanished or unreadable entry, treat as not existing
                continue
            entries.append((path / entry.name, is_dir))

    if sort_entries:
        entries.sort(key=lambda e: display_name(e[0].name))
    return entries


def render_tree(
    path,
    prefix: str,
    show_all: bool,
    patterns: list[str],
    sink: OutputSink,
    sort_entries: bool = False,
    errors=None,
) -> bool:
    """
    Write the subtree under path to sink, one line per entry.
    Returns False if path itself could not be listed. Failures in nested
    directories are reported to errors and the remaining siblings still render.
    """
    path = Path(path)
    errors = errors if errors is not None else sys.stderr

    try:
        entries = list_entries(path, show_all, patterns, sort_entries)
    except OSError as e:
        print(f"ERROR: failed reading directory {display_name(str(path))}: {e}", file=errors)
        return False

    total = len(entries)
    for i, (entry_path, is_dir) in enumerate(entries):
        is_last = i == total - 1
        connector = CORNER if is_last else BRANCH
        sink.write_line(f"{prefix}{connector} {display_name(entry_path.name)}")

        if is_dir:
            new_prefix = prefix + (SPACE if is_last else PIPE)
            render_tree(entry_path, new_prefix, show_all, patterns, sink, sort_entries, errors)
    return True
