# common/orchestrator.py
# -*- coding: utf-8 -*-
"""
Centralized orchestrator for managing and executing sequences of tasks.
"""

import logging
import sys
from typing import Any, Callable, Dict, List, Optional


class Orchestrator:
    """A centralized orchestrator to run a series of defined tasks."""

    def __init__(
        self,
        app_settings: Any,
        orchestrator_logger: Optional[logging.Logger] = None,
    ):
        """
        Initializes the Orchestrator.

        Args:
            app_settings: The application settings object.
            orchestrator_logger: An optional logger instance.
        """
        self.app_settings = app_settings
        self.logger = orchestrator_logger or logging.getLogger(__name__)
        self.tasks: List[Dict[str, Any]] = []
        # Values forwarded explicitly from one task to later ones, e.g. "env"
        self.context: Dict[str, Any] = {}

    def add_task(
        self,
        name: str,
        func: Callable,
        args: Optional[List[Any]] = None,
        kwargs: Optional[Dict[str, Any]] = None,
        # The provisioning pipeline registers no fatal tasks.
        fatal: bool = False,
    ):
        """
        Adds a task to the execution list.

        Args:
            name: A human-readable name for the task.
            func: The function to execute for this task.
            args: A list of positional arguments to pass to the function.
            kwargs: A dictionary of keyword arguments to pass to the function.
            fatal: If True, an exception raised by this task halts the run.
        """
        self.tasks.append({
            "name": name,
            "func": func,
            "args": args or [],
            "kwargs": kwargs or {},
            "fatal": fatal,
        })
        self.logger.debug(f"Task '{name}' added to the queue.")

    def run(self) -> bool:
        """
        Executes all added tasks in sequence.

        A task that returns False or raises (when non-fatal) is reported and
        the next task still runs.

        Returns:
            True if every task completed, False if any did not.
        """
        self.logger.info("Orchestration started.")
        all_completed = True
        for i, task in enumerate(self.tasks):
            task_name = task["name"]
            self.logger.info(
                f"--- Stage {i + 1}: Running task '{task_name}' ---"
            )

            try:
                task["kwargs"]["context"] = self.context
                task["kwargs"]["app_settings"] = self.app_settings

                result = task["func"](*task["args"], **task["kwargs"])

                self.context[f"{task_name}_result"] = result

                if result is False:
                    all_completed = False
                    self.logger.warning(
                        f"⚠️ Task '{task_name}' did not complete. Continuing orchestration."
                    )
                else:
                    self.logger.info(
                        f"✅ Task '{task_name}' completed successfully."
                    )

            except Exception as e:
                all_completed = False
                self.logger.critical(
                    f"🔥 Task '{task_name}' failed: {e}", exc_info=True
                )
                if task.get("fatal", False):
                    self.logger.error(
                        "A fatal error occurred. Halting orchestration and exiting application."
                    )
                    sys.exit(1)
                else:
                    self.logger.warning(
                        f"Task '{task_name}' was non-fatal. Continuing orchestration."
                    )

        if all_completed:
            self.logger.info("✨ Orchestration finished successfully.")
        else:
            self.logger.info(
                "✨ Orchestration finished. Some tasks did not complete."
            )
        return all_completed
