"""
Activity manager: a stack-based interpreter for console screens.

The top of the stack is the current screen. Each loop iteration writes its
prompt, reads one line, and hands the line over; a screen that reports it is
done gets `on_finish()` and is popped. Screens may push other screens from
their input handlers, in which case the pushed screen receives the next line
and the one underneath resumes only after it is gone.

Usage:
    from record_tracker.console import Console
    from record_tracker.manager import ActivityManager

    manager = ActivityManager(Console())
    manager.start(root_menu)  # blocks until the stack is empty
"""

from __future__ import annotations

from typing import List, Optional

from record_tracker.activities.abstract import Activity
from record_tracker.console import Console
from record_tracker.errors import IllegalStateError, InputExhaustedError
from record_tracker.utils.logging import get_logger

log = get_logger(__name__)


class ActivityManager:
    """
    Runs activities until none remain.

    Parameters
    ----------
    console : Console
        Where prompts are written and input lines are read from.
    max_empty_reads : int
        Consecutive end-of-input reads tolerated before giving up with
        `InputExhaustedError`. Zero means end-of-input is always treated as
        an empty line.
    """

    def __init__(self, console: Console, max_empty_reads: int = 0) -> None:
        self.console = console
        self.max_empty_reads = max_empty_reads
        self._activities: List[Activity] = []

    @property
    def depth(self) -> int:
        return len(self._activities)

    @property
    def is_running(self) -> bool:
        return bool(self._activities)

    @property
    def current(self) -> Optional[Activity]:
        return self._activities[-1] if self._activities else None

    def push(self, activity: Activity) -> None:
        """Make `activity` the current screen and run its `on_start()`."""
        self._activities.append(activity)
        log.debug(
            f"[PUSH] {type(activity).__name__}",
            extra={"activity": type(activity).__name__, "depth": self.depth},
        )
        activity.on_start()

    def start(self, activity: Activity) -> None:
        """
        Push `activity` and block in the run loop until the stack is empty.

        Raises
        ------
        IllegalStateError
            If the manager already has activities on its stack.
        """
        if self._activities:
            raise IllegalStateError(
                "ActivityManager is already running",
                details={"depth": self.depth},
            )

        log.info(f"[RUN START] {type(activity).__name__}")
        self.push(activity)
        self._mainloop()
        log.info("[RUN COMPLETE] activity stack empty")

    def _mainloop(self) -> None:
        empty_reads = 0
        while self._activities:
            activity = self._activities[-1]
            self.console.prompt(activity.prompt)
            line = self.console.read_line()

            if self.console.at_eof:
                empty_reads += 1
                if self.max_empty_reads and empty_reads >= self.max_empty_reads:
                    raise InputExhaustedError(
                        f"End of input reached {empty_reads} times in a row",
                        details={"depth": self.depth},
                    )
            else:
                empty_reads = 0

            if activity.handle_input(line):
                activity.on_finish()
                self._activities.remove(activity)
                log.debug(
                    f"[POP] {type(activity).__name__}",
                    extra={"activity": type(activity).__name__, "depth": self.depth},
                )


__all__ = ["ActivityManager"]
