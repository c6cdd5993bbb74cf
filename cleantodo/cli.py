"""Command-line interface for the task list."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from cleantodo import __version__
from cleantodo.dispatcher import CommandDispatcher, CommandResult
from cleantodo.logging_setup import setup_logging
from cleantodo.manager import TaskManager
from cleantodo.shell import InteractiveShell
from cleantodo.storage import TaskStorage


DEFAULT_TASKS_FILE = "tasks.json"
WELCOME = "[bold green]🚀 Welcome to Clean Todo CLI![/bold green]"

console = Console()


def build_dispatcher(tasks_file: Path, out: Optional[Console] = None) -> CommandDispatcher:
    """Wire storage, task operations and dispatch around one tasks file."""
    out = out or console
    storage = TaskStorage(tasks_file, console=out)
    return CommandDispatcher(TaskManager(storage, console=out), console=out)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option(
    "--cli", "force_cli",
    is_flag=True,
    help="Run the following command once, even when no command is given",
)
@click.option(
    "-f", "--file", "tasks_file",
    default=DEFAULT_TASKS_FILE,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the tasks file",
    show_default=True,
)
@click.option("-v", "--verbose", is_flag=True, help="Show diagnostic logging on stderr")
@click.version_option(__version__, prog_name="todo")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, force_cli, tasks_file, verbose, args):
    """A personal task list, as one-shot commands or an interactive shell.

    \b
    Examples:
      todo                      start the interactive shell
      todo add Buy groceries    add a task
      todo list                 show all tasks
      todo complete 1           mark task 1 as completed
      todo remove 2             remove task 2
    """
    setup_logging(verbose)
    dispatcher = build_dispatcher(tasks_file)

    if force_cli:
        if not args:
            console.print(WELCOME)
            dispatcher.show_usage()
            return
        run_once(ctx, dispatcher, args)
        return

    if not args:
        console.print(WELCOME)
        console.print("Starting interactive mode...\n")
        InteractiveShell(dispatcher).run()
        return

    run_once(ctx, dispatcher, args)


def run_once(ctx: click.Context, dispatcher: CommandDispatcher, args: tuple) -> None:
    """Dispatch a single pre-split command; failures exit with status 1.

    Arguments arrive already split by the shell, so no quote handling is
    applied here.
    """
    command, *command_args = args
    result = dispatcher.process_command(command.lower(), list(command_args))
    if result is CommandResult.FAILED:
        ctx.exit(1)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        cli(args=argv, prog_name="todo")
        return 0
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
