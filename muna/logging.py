#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from contextvars import ContextVar
from rich.progress import Progress, SpinnerColumn, TextColumn, TaskID

current_progress: ContextVar[Progress | None] = ContextVar("current_progress", default=None)

class CustomProgress:
    """
    Spinner progress display shared by nested `CustomProgressTask` blocks.
    """

    def __init__(self, transient: bool=False):
        self.__progress = Progress(
            SpinnerColumn(spinner_name="dots", finished_text="[bold spring_green3]✔[/bold spring_green3]"),
            TextColumn("[progress.description]{task.description}"),
            transient=transient
        )
        self.__token = None

    def __enter__(self) -> Progress:
        self.__progress.start()
        self.__token = current_progress.set(self.__progress)
        return self.__progress

    def __exit__(self, exc_type, exc_value, traceback):
        current_progress.reset(self.__token)
        self.__progress.stop()

class CustomProgressTask:
    """
    Progress task which shows a spinner while its block runs.
    The task is marked as finished when the block exits without error.
    """

    def __init__(
        self,
        *,
        loading_text: str,
        done_text: str | None=None
    ):
        self.loading_text = loading_text
        self.done_text = done_text if done_text is not None else loading_text
        self.__task_id: TaskID | None = None

    def __enter__(self) -> CustomProgressTask:
        progress = current_progress.get()
        if progress is not None:
            self.__task_id = progress.add_task(self.loading_text, total=1)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        progress = current_progress.get()
        if progress is None or self.__task_id is None:
            return
        if exc_type is None:
            progress.update(self.__task_id, description=self.done_text, completed=1)
        else:
            progress.update(self.__task_id, description=f"[bright_red]{self.loading_text}[/bright_red]")
            progress.stop_task(self.__task_id)

    def finish(self, message: str):
        """
        Set the text shown once the task completes.
        """
        self.done_text = message
