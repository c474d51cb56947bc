"""Interactive read-dispatch-render loop."""

import logging
from typing import Callable, Optional

from rich.text import Text

from ..config import SessionConfig
from .commands import CommandDispatcher
from .manager import TreeSession
from .render import Renderer

logger = logging.getLogger(__name__)


class Playground:
    """Runs a TreeSession interactively until exit, quit or end of input."""

    def __init__(self,
                 config: Optional[SessionConfig] = None,
                 renderer: Optional[Renderer] = None):
        self.session = TreeSession(config)
        self.dispatcher = CommandDispatcher(self.session)
        self.renderer = renderer or Renderer(colors=self.session.colors)
        self.renderer.colors = self.session.colors

    def prompt(self) -> Text:
        name = self.session.current_name
        style = "green" if name else "yellow"
        return self.renderer.prompt(self.session.config.prompt_for(name), style)

    def execute(self, command_line: str) -> bool:
        """Run and render one line. Returns False when the loop should stop."""
        result = self.dispatcher.dispatch(command_line)
        self.renderer.colors = self.session.colors
        self.renderer.render(result)
        return not (result is not None and result.exit)

    def run(self, read_line: Optional[Callable[[Text], str]] = None) -> None:
        """Read commands until the user leaves.

        Args:
            read_line: Function returning the next input line for a prompt.
                Defaults to the console's own input. End of input (EOFError)
                ends the session.
        """
        read_line = read_line or self.renderer.console.input
        self.renderer.banner()
        logger.debug("Session started for element type %s", self.session.element_type.value)

        try:
            while True:
                try:
                    command_line = read_line(self.prompt())
                except EOFError:
                    self.renderer.console.print()
                    break
                if not self.execute(command_line):
                    break
        finally:
            self.session.close()
            logger.debug("Session closed")
