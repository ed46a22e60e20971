# output_sink.py
# Where rendered tree lines go: the console or a freshly created file.

import sys
from pathlib import Path


class OutputSink:
    def __init__(self, stream, owns_stream: bool = False):
        self.stream = stream
        self.owns_stream = owns_stream
        self.closed = False

    @classmethod
    def console(cls) -> "OutputSink":
        return cls(sys.stdout)

    @classmethod
    def to_file(cls, path) -> "OutputSink":
        """
        Create (or truncate) the file at path and write to it.
        Raises OSError if the file cannot be created.
        """
        f = open(Path(path), "w", encoding="utf-8", newline="\n")
        return cls(f, owns_stream=True)

    def write_line(self, text: str):
        self.stream.write(text + "\n")

    def close(self):
        if self.closed:
            return
        self.stream.flush()
        if self.owns_stream:
            self.stream.close()
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
