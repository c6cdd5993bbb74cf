"""Command dispatch shared by one-shot and interactive modes."""

import logging
from enum import Enum
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from cleantodo.exceptions import UnknownCommandError
from cleantodo.manager import TaskManager

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit", "q")

USAGE_COMMANDS = [
    ('add "Task description"', "Add a new task"),
    ("list", "List all tasks"),
    ("complete <task-number>", "Mark task as completed"),
    ("remove <task-number>", "Remove a task"),
    ("help", "Show this help message"),
    ("exit, quit, q", "Exit the application"),
]

USAGE_EXAMPLES = ['add "Buy groceries"', "complete 1", "remove 2"]


class CommandResult(Enum):
    """Outcome of dispatching one command."""

    CONTINUE = "continue"
    FAILED = "failed"
    EXIT = "exit"

    @classmethod
    def from_success(cls, success: bool) -> "CommandResult":
        return cls.CONTINUE if success else cls.FAILED


class CommandDispatcher:
    """Maps command names to task operations and meta actions."""

    def __init__(self, manager: TaskManager, console: Optional[Console] = None):
        self.manager = manager
        self.console = console or manager.console
        self._handlers: dict[str, Callable[[list[str]], CommandResult]] = {
            "add": self._add,
            "list": self._list,
            "complete": self._complete,
            "remove": self._remove,
            "help": self._help,
        }
        for name in EXIT_COMMANDS:
            self._handlers[name] = self._exit

    def show_usage(self) -> None:
        self.console.print("\n[bold]📚 Available Commands:[/bold]")
        for syntax, description in USAGE_COMMANDS:
            self.console.print(f"  {escape(syntax):<28} - {description}", highlight=False)
        self.console.print("\n[bold]💡 Examples:[/bold]")
        for example in USAGE_EXAMPLES:
            self.console.print(f"  {example}", highlight=False)

    def resolve(self, command: str) -> Callable[[list[str]], CommandResult]:
        """Return the handler for a command name.

        Raises:
            UnknownCommandError: If no handler is registered for the name.
        """
        try:
            return self._handlers[command.lower()]
        except KeyError:
            raise UnknownCommandError(command) from None

    def process_command(self, command: str, args: list[str]) -> CommandResult:
        """Run a single command.

        Args:
            command: Command name (matched case-insensitively).
            args: Arguments following the command.

        Returns:
            CONTINUE on success, FAILED if the command failed, EXIT if an
            exit alias was given.
        """
        try:
            handler = self.resolve(command)
        except UnknownCommandError as e:
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            self.show_usage()
            return CommandResult.FAILED

        result = handler(args)
        logger.debug("Command %r with %d args -> %s", command, len(args), result.name)
        return result

    def _add(self, args: list[str]) -> CommandResult:
        if not args:
            self.console.print("[red]Error:[/red] Please provide a task description")
            return CommandResult.FAILED
        return CommandResult.from_success(self.manager.add_task(" ".join(args)))

    def _list(self, args: list[str]) -> CommandResult:
        self.manager.list_tasks()
        return CommandResult.CONTINUE

    def _complete(self, args: list[str]) -> CommandResult:
        if not args:
            self.console.print("[red]Error:[/red] Please provide a task number")
            return CommandResult.FAILED
        return CommandResult.from_success(self.manager.complete_task(args[0]))

    def _remove(self, args: list[str]) -> CommandResult:
        if not args:
            self.console.print("[red]Error:[/red] Please provide a task number")
            return CommandResult.FAILED
        return CommandResult.from_success(self.manager.remove_task(args[0]))

    def _help(self, args: list[str]) -> CommandResult:
        self.show_usage()
        return CommandResult.CONTINUE

    def _exit(self, args: list[str]) -> CommandResult:
        return CommandResult.EXIT
