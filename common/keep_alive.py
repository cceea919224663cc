# common/keep_alive.py
# -*- coding: utf-8 -*-
"""
Background refresh of cached sudo credentials.

Long provisioning runs outlive the sudo timestamp. ``SudoKeepAlive`` refreshes
it on a fixed interval from a daemon thread so later elevated steps do not
prompt again. The thread shares no state with the pipeline; its failures are
only logged.
"""

import logging
import threading
from typing import Optional

from installer.config_models import KEEP_ALIVE_INTERVAL_DEFAULT, AppSettings

from .command_utils import get_symbols, log_provisioner, run_command

module_logger = logging.getLogger(__name__)

KEEP_ALIVE_COMMAND = ["sudo", "-n", "true"]


class SudoKeepAlive:
    """A cancellable ticker that runs ``sudo -n true`` every ``interval`` seconds."""

    def __init__(
        self,
        app_settings: Optional[AppSettings],
        interval: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.app_settings = app_settings
        if interval is None:
            interval = (
                app_settings.keep_alive_interval
                if app_settings
                else KEEP_ALIVE_INTERVAL_DEFAULT
            )
        self.interval = interval
        self.logger = logger or module_logger
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def refresh(self) -> bool:
        """Runs one credential refresh. Returns True on success."""
        result = run_command(
            KEEP_ALIVE_COMMAND,
            self.app_settings,
            quiet=True,
            current_logger=self.logger,
        )
        if not result.success:
            symbols = get_symbols(self.app_settings)
            log_provisioner(
                f"{symbols.get('warning', '⚠️')} Error keeping sudo alive (rc {result.returncode}).",
                "warning",
                self.logger,
                self.app_settings,
            )
        return result.success

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.refresh()
            if self._stop_event.wait(self.interval):
                break

    def start(self) -> None:
        """Starts the background thread. Calling it twice is a no-op."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="sudo-keep-alive", daemon=True
        )
        self._thread.start()
        self.logger.debug(
            f"Sudo keep-alive started (every {self.interval:g}s)."
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signals the thread to stop and waits for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
            self.logger.debug("Sudo keep-alive stopped.")
