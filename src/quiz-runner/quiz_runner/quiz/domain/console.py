"""QuizConsole Protocol: the terminal the quiz talks to."""

from typing import Protocol


class QuizConsole(Protocol):
    """Writes prompts and reads typed lines.

    ``read_line`` returns one line including any trailing newline and raises
    InputReadError when input is exhausted or unreadable. Awaiting it must be
    safe to cancel without losing a line.
    """

    def write(self, text: str) -> None: ...

    async def read_line(self) -> str: ...
