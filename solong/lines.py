"""Reading a stream line by line in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFFER_SIZE = 42


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters (or bytes) at a time and
    only as far as needed for the next line. The last line is yielded
    without a newline if the stream does not end with one.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    buffer = None
    while chunk := stream.read(buffer_size):
        buffer = chunk if buffer is None else buffer + chunk
        newline = b"\n" if isinstance(buffer, bytes) else "\n"
        while (end := buffer.find(newline)) != -1:
            yield buffer[:end + 1]
            buffer = buffer[end + 1:]
    if buffer:
        yield buffer