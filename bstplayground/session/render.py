"""Console rendering for command results, built on rich."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .commands import CommandResult, Line


class Renderer:
    """Writes CommandResults to a rich Console.

    Styles are applied only while colors are enabled; with colors off the
    same text is printed plain.
    """

    def __init__(self, console: Optional[Console] = None, colors: bool = True):
        self.console = console or Console(highlight=False)
        self.colors = colors

    def to_text(self, line: Line) -> Text:
        text = Text()
        for fragment, style in line.segments:
            text.append(fragment, style=style if self.colors else None)
        return text

    def render(self, result: Optional[CommandResult]) -> None:
        if result is None:
            return
        for line in result.lines:
            self.console.print(self.to_text(line), highlight=False, soft_wrap=True)

    def banner(self) -> None:
        self.render(CommandResult([
            Line((("Binary Tree Playground", "bold green"),)),
            Line((("Type 'help' for commands, 'exit' to quit", "cyan"),)),
        ]))

    def prompt(self, text: str, style: str) -> Text:
        return Text(text, style=style if self.colors else None)
