"""StdioConsole: prompts on stdout, answers from a background stdin reader."""

import asyncio
import concurrent.futures
import sys
import threading
from collections.abc import Callable
from typing import TextIO, TypeAlias

from quiz_runner.quiz.infrastructure.errors import InputReadError


class _EndOfInput:
    pass


_EOF = _EndOfInput()

_Delivery: TypeAlias = str | _EndOfInput | OSError | ValueError


def _unlocked_readline(stream: TextIO) -> Callable[[], str]:
    """Return a readline for stream that does not hold the buffered reader's lock.

    Interpreter shutdown closes sys.stdin and needs that lock, while the reader
    thread may still be blocked waiting for a line. Streams without an
    underlying raw file (test doubles) are read directly.
    """
    raw = getattr(getattr(stream, "buffer", None), "raw", None)
    if raw is None:
        return stream.readline
    encoding = getattr(stream, "encoding", None) or "utf-8"

    def readline() -> str:
        return raw.readline().decode(encoding, errors="replace")

    return readline


class StdioConsole:
    """Satisfies the QuizConsole protocol for a real terminal or pipe.

    Blocking ``readline`` calls run on one daemon thread, started on the first
    read and never joined. Each line is handed to the event loop through a
    single-slot queue, so the thread is at most one line ahead of the reader.
    Waiting on the queue can be cancelled by a deadline without losing the line:
    it stays queued for the next ``read_line`` call, whether that is the next
    question or the retry prompt.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._lines: asyncio.Queue[_Delivery] | None = None
        self._closed_reason: str | None = None

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    async def read_line(self) -> str:
        if self._closed_reason is not None:
            raise InputReadError(reason=self._closed_reason)
        if self._lines is None:
            self._lines = self._start_reader()

        item = await self._lines.get()
        if isinstance(item, str):
            return item
        if isinstance(item, _EndOfInput):
            self._closed_reason = "end of input"
        else:
            self._closed_reason = str(item)
        raise InputReadError(reason=self._closed_reason)

    def _start_reader(self) -> asyncio.Queue[_Delivery]:
        loop = asyncio.get_running_loop()
        lines: asyncio.Queue[_Delivery] = asyncio.Queue(maxsize=1)
        thread = threading.Thread(
            target=self._pump,
            args=(loop, lines),
            name="quiz-stdin-reader",
            daemon=True,
        )
        thread.start()
        return lines

    def _pump(
        self,
        loop: asyncio.AbstractEventLoop,
        lines: asyncio.Queue[_Delivery],
    ) -> None:
        """Read stdin line by line until end of input or an error, then stop."""
        readline = _unlocked_readline(self._stdin)
        while True:
            item: _Delivery
            try:
                line = readline()
            except (OSError, ValueError) as exc:
                item = exc
            else:
                item = line if line else _EOF

            try:
                asyncio.run_coroutine_threadsafe(lines.put(item), loop).result()
            except RuntimeError:
                # Event loop already closed; nobody is left to read.
                return
            except concurrent.futures.CancelledError:
                # Loop shut down while this line waited for a free slot.
                return
            if not isinstance(item, str):
                return
