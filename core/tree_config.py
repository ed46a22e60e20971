# tree_config.py
# Startup configuration, built once from argv and environment defaults.
# Env vars (can live in .env): GITTREE_SHOW_ALL, GITTREE_OUTPUT, GITTREE_SORT

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

TRUTHY = {"1", "true", "yes", "on"}

USAGE = """Usage: gittree [-a|--all] [-s|--sort] [-o|--output FILE]
  -a, --all          show hidden and .gitignored entries
  -s, --sort         sort entries by name instead of listing order
  -o, --output FILE  write the tree to FILE (overwrites) instead of stdout
  -h, --help         show this message"""


class UsageError(Exception):
    pass


class HelpRequested(Exception):
    pass


def _env_flag(env, key: str) -> bool:
    return env.get(key, "").strip().lower() in TRUTHY


@dataclass
class TreeConfig:
    show_all: bool = False
    output: Optional[str] = None
    sort_entries: bool = False
    root: Optional[Path] = None

    @classmethod
    def from_args(cls, argv: list[str], env=None) -> "TreeConfig":
        """
        Build the config from command line args (without the program name).
        Flags override env defaults. Unknown args are ignored.
        Raises UsageError if -o/--output has no value, HelpRequested on -h.
        """
        env = os.environ if env is None else env

        if any(arg in ("-h", "--help") for arg in argv):
            raise HelpRequested()

        show_all = _env_flag(env, "GITTREE_SHOW_ALL") or any(arg in ("-a", "--all") for arg in argv)
        sort_entries = _env_flag(env, "GITTREE_SORT") or any(arg in ("-s", "--sort") for arg in argv)
        output = env.get("GITTREE_OUTPUT") or None

        for i, arg in enumerate(argv):
            if arg in ("-o", "--output"):
                if i + 1 >= len(argv):
                    raise UsageError("no output file specified after -o/--output")
                output = argv[i + 1]
                break

        return cls(show_all=show_all, output=output, sort_entries=sort_entries)
