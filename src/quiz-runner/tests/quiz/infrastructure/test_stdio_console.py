"""Tests for StdioConsole: the background stdin reader and stdout writer."""

import asyncio
import io
import threading

import pytest

from quiz_runner.quiz.infrastructure.errors import InputReadError
from quiz_runner.quiz.infrastructure.stdio_console import StdioConsole


class _GatedStdin:
    """A stdin whose first readline blocks until release is set."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.release = threading.Event()

    def readline(self) -> str:
        self.release.wait(timeout=5)
        return self._lines.pop(0) if self._lines else ""


class _BrokenStdin:
    def readline(self) -> str:
        raise OSError("device not ready")


class TestWrite:
    def test_write_goes_to_stdout_without_newline(self) -> None:
        stdout = io.StringIO()
        console = StdioConsole(stdin=io.StringIO(""), stdout=stdout)

        console.write("5+5: ")

        assert stdout.getvalue() == "5+5: "


class TestReadLine:
    async def test_lines_arrive_in_order(self) -> None:
        console = StdioConsole(stdin=io.StringIO("10\nParis\n"), stdout=io.StringIO())

        assert await console.read_line() == "10\n"
        assert await console.read_line() == "Paris\n"

    async def test_end_of_input_raises_input_read_error(self) -> None:
        console = StdioConsole(stdin=io.StringIO("10\n"), stdout=io.StringIO())
        await console.read_line()

        with pytest.raises(InputReadError, match="end of input"):
            await console.read_line()

    async def test_reads_after_end_of_input_keep_failing(self) -> None:
        console = StdioConsole(stdin=io.StringIO(""), stdout=io.StringIO())
        with pytest.raises(InputReadError):
            await console.read_line()

        with pytest.raises(InputReadError):
            await console.read_line()

    async def test_read_failure_raises_input_read_error(self) -> None:
        console = StdioConsole(stdin=_BrokenStdin(), stdout=io.StringIO())

        with pytest.raises(InputReadError, match="device not ready"):
            await console.read_line()

    async def test_decodes_from_the_raw_byte_stream(self) -> None:
        stdin = io.TextIOWrapper(
            io.BufferedReader(io.BytesIO("café\n".encode("utf-8"))),
            encoding="utf-8",
        )
        console = StdioConsole(stdin=stdin, stdout=io.StringIO())

        assert await console.read_line() == "café\n"


class TestCancellation:
    async def test_cancelled_wait_keeps_the_line_for_the_next_reader(self) -> None:
        stdin = _GatedStdin(["Paris\n"])
        console = StdioConsole(stdin=stdin, stdout=io.StringIO())

        with pytest.raises(TimeoutError):
            async with asyncio.timeout(0.05):
                await console.read_line()

        stdin.release.set()
        assert await console.read_line() == "Paris\n"


class TestShutdown:
    def test_unread_lines_at_shutdown_do_not_crash_the_reader(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        failures: list[threading.ExceptHookArgs] = []
        monkeypatch.setattr(threading, "excepthook", failures.append)
        before = set(threading.enumerate())
        console = StdioConsole(
            stdin=io.StringIO("10\nextra1\nextra2\nextra3\n"), stdout=io.StringIO()
        )

        async def answer_one_question() -> str:
            line = await console.read_line()
            # The reader fills the free slot, then blocks on the next line.
            await asyncio.sleep(0.1)
            return line

        assert asyncio.run(answer_one_question()) == "10\n"

        for thread in set(threading.enumerate()) - before:
            if thread.name == "quiz-stdin-reader":
                thread.join(timeout=2)
        assert failures == []
