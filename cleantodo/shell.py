"""Interactive read-eval-print loop."""

import logging
from typing import Optional

from rich.console import Console

from cleantodo.dispatcher import CommandDispatcher, CommandResult
from cleantodo.parser import parse_input

logger = logging.getLogger(__name__)

PROMPT = "📝 todo> "
WELCOME = "[bold green]🚀 Welcome to Clean Todo CLI - Interactive Mode![/bold green]"
GOODBYE = "👋 Goodbye! Thanks for using Clean Todo CLI!"


class InteractiveShell:
    """Prompts for commands until an exit command, Ctrl+C or end of input."""

    def __init__(self, dispatcher: CommandDispatcher, console: Optional[Console] = None):
        self.dispatcher = dispatcher
        self.console = console or dispatcher.console
        self.running = False

    def run(self) -> None:
        """Show the banner and current tasks, then loop over input lines."""
        self.console.print(WELCOME)
        self.console.print('Type "help" for available commands or "exit" to quit.\n')
        self.dispatcher.manager.list_tasks()

        self.running = True
        while self.running:
            try:
                line = self.console.input(PROMPT)
                self.handle_line(line)
            except (KeyboardInterrupt, EOFError) as e:
                logger.debug("Shell stopped by %s", type(e).__name__)
                self.console.print()
                self._stop()

    def handle_line(self, line: str) -> Optional[CommandResult]:
        """Parse and dispatch one line. Blank lines are ignored."""
        command, args = parse_input(line)
        if not command:
            return None

        result = self.dispatcher.process_command(command, args)
        if result is CommandResult.EXIT:
            self._stop()
        else:
            self.console.print()
        return result

    def _stop(self) -> None:
        self.console.print(GOODBYE)
        self.running = False
