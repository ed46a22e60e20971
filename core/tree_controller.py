# tree_controller.py
# Wires the pipeline: resolve root -> load .gitignore -> open sink -> render.

import os
import sys
from pathlib import Path

from core.ignore_rules import read_gitignore
from core.output_sink import OutputSink
from core.tree_config import TreeConfig
from core.tree_renderer import render_tree, display_name

EXIT_OK = 0
EXIT_RENDER_FAILED = 1
EXIT_FATAL = 2


class TreeController:
    def __init__(self, config: TreeConfig):
        self.config = config

    def _resolve_root(self) -> Path:
        if self.config.root is not None:
            return Path(self.config.root).resolve()
        return Path(os.getcwd())

    def _open_sink(self) -> OutputSink:
        if self.config.output:
            return OutputSink.to_file(self.config.output)
        return OutputSink.console()

    def run(self) -> int:
        """
        Print the tree for the configured root.
        Returns the process exit code.
        """
        try:
            root = self._resolve_root()
        except OSError as e:
            print(f"[gittree] ERROR: failed to get current directory: {e}", file=sys.stderr)
            return EXIT_FATAL

        patterns = read_gitignore(root)

        try:
            sink = self._open_sink()
        except OSError as e:
            print(f"[gittree] ERROR: failed to create output file {self.config.output}: {e}", file=sys.stderr)
            return EXIT_FATAL

        with sink:
            sink.write_line(display_name(str(root)))
            ok = render_tree(
                root,
                "",
                self.config.show_all,
                patterns,
                sink,
                sort_entries=self.config.sort_entries,
            )

        if not ok:
            print("[gittree] ERROR: failed to print tree", file=sys.stderr)
            return EXIT_RENDER_FAILED
        return EXIT_OK
