"""Line-oriented access to the user's terminal, or to any streams standing in for it."""

import sys
from typing import Iterator, Optional, TextIO


class Console:
    """Reads lines from an input stream and writes messages to output and error streams.

    Streams default to the process's stdin/stdout/stderr as they are when the instance is created.
    Tests can pass :class:`io.StringIO` instances instead.
    """

    def __init__(self, stdin: TextIO = None, stdout: TextIO = None, stderr: TextIO = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def read_line(self) -> Optional[str]:
        """Blocks until a line is available and returns it without its line terminator.

        Returns None once the input is exhausted.
        """
        line = self.stdin.readline()
        if not line:
            return None
        return line[:-1] if line.endswith('\n') else line

    def lines(self) -> Iterator[str]:
        """Yields lines as they are read, until the input is exhausted."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        return self.read_line()

    def write(self, text: str = '') -> None:
        """Prints a line of text.

        Text read from a note may hold undecodable bytes (as lone surrogates); if the stream refuses them, they are
        written to its underlying binary buffer as the original bytes, or escaped when there is no buffer.
        """
        try:
            print(text, file=self.stdout)
        except UnicodeEncodeError:
            encoding = getattr(self.stdout, 'encoding', None) or 'utf-8'
            buffer = getattr(self.stdout, 'buffer', None)
            if buffer is None:
                print(text.encode(encoding, 'backslashreplace').decode(encoding), file=self.stdout)
                return
            try:
                data = (text + '\n').encode(encoding, 'surrogateescape')
            except UnicodeEncodeError:
                data = (text + '\n').encode(encoding, 'backslashreplace')
            self.stdout.flush()
            buffer.write(data)
            buffer.flush()

    def error(self, text: str) -> None:
        print(text, file=self.stderr)
