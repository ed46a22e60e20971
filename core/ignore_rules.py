# ignore_rules.py
# Loads the root .gitignore as a flat list of raw patterns.
# Matching is exact name OR prefix (after stripping trailing '/'), no globs.

from pathlib import Path


def read_gitignore(root) -> list[str]:
    gi = Path(root) / ".gitignore"
    patterns = []
    try:
        f = open(gi, "rb")
    except OSError:
        return patterns

    with f:
        for raw in f:
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError:
                continue
            if not line or line.startswith("#"):
                continue
            patterns.append(line)
    return patterns


def matches_gitignore(name: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        if name == pattern or name.startswith(pattern.rstrip("/")):
            return True
    return False
