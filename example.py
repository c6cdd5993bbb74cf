"""Example usage of the cleantodo library."""

import tempfile
from pathlib import Path

from cleantodo import CommandDispatcher, TaskManager, TaskStorage


def main():
    """Demonstrate basic task list functionality."""
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = TaskStorage(Path(tmpdir) / "tasks.json")
        manager = TaskManager(storage)

        # Add some tasks
        manager.add_task("Review code")
        manager.add_task("Write documentation")
        manager.add_task("Fix bug")
        manager.list_tasks()
        print()

        # Complete a task, then remove another
        manager.complete_task("1")
        manager.remove_task("3")
        manager.list_tasks()
        print()

        # The same operations through the command dispatcher
        dispatcher = CommandDispatcher(manager)
        dispatcher.process_command("add", ["Plan", "sprint"])
        dispatcher.process_command("list", [])

        print("Pending tasks:")
        for task in manager.get_tasks():
            if not task.completed:
                print(f"  - {task}")


if __name__ == "__main__":
    main()
