"""
System Reporter - Centralized logging for Interprete services.

Wraps the standard logging module with verbosity filtering and
context tags. Logs always go to stdout (container friendly); a log
directory adds a per-service file with time-based retention.
"""

import logging
import os
import sys
import threading
import time
from typing import Optional

# Constants
LOG_RETENTION_DAYS = 1
LOG_CHECK_INTERVAL = 3600  # 1 hour
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class SystemReporter:
    """
    Logger with verbose filtering and context tags.

    Verbose Levels:
        0 = Critical only (always visible)
        1 = Important messages (default)
        2 = Detailed information
        3 = Debug/verbose

    Every message is rendered as ``[context] message``.
    """

    def __init__(
        self,
        name: str = "system",
        log_dir: Optional[str] = None,
        level: int = logging.INFO,
        verbose: int = 1,
    ) -> None:
        """
        Initialize SystemReporter.

        Args:
            name: Logger name (used for filename if log_dir provided)
            log_dir: Directory for log files. If None, logs to stdout only.
                    Relative paths resolve against the current directory.
            level: Python logging level
            verbose: Verbosity filter (0-3)
        """
        self.name = name
        self.verbose = max(0, min(3, verbose))
        self.log_file: Optional[str] = None

        self._init_logger(name, log_dir, level)

    @classmethod
    def from_level_name(
        cls,
        name: str,
        level_name: str = "info",
        log_dir: Optional[str] = None,
        verbose: int = 1,
    ) -> "SystemReporter":
        """Build a reporter from a textual level such as ``"debug"``."""
        level = LEVELS.get(level_name.lower(), logging.INFO)
        return cls(name=name, log_dir=log_dir, level=level, verbose=verbose)

    def _init_logger(
        self, name: str, log_dir: Optional[str], level: int
    ) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_dir:
            log_file = os.path.join(os.path.abspath(log_dir), f"{name}.log")
            os.makedirs(os.path.dirname(log_file), exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            retention_thread = threading.Thread(
                target=self._log_retention_worker,
                args=(log_file,),
                daemon=True,
            )
            retention_thread.start()
            self.log_file = log_file

    def _log_retention_worker(self, log_file: str) -> None:
        """Truncate the log file once it is older than the retention window."""
        while True:
            try:
                if os.path.exists(log_file):
                    age_days = (time.time() - os.path.getctime(log_file)) / 86400
                    if age_days > LOG_RETENTION_DAYS:
                        with open(log_file, "w", encoding="utf-8"):
                            pass
            except OSError as e:
                print(f"⚠ Retention worker error: {e}", file=sys.stderr)
            time.sleep(LOG_CHECK_INTERVAL)

    def set_verbose(self, level: int) -> None:
        """Update verbosity level."""
        self.verbose = max(0, min(3, level))
        self.info(
            f"Verbosity set to {self.verbose}",
            context="SystemReporter",
            verbose_level=0,
        )

    def _should_log(self, verbose_level: int) -> bool:
        return self.verbose >= verbose_level

    # Core logging methods
    def debug(
        self, msg: str, context: str = "system", verbose_level: int = 3
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.debug(f"[{context}] {msg}")

    def info(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.info(f"[{context}] {msg}")

    def warning(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.warning(f"[{context}] {msg}")

    def error(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.error(f"[{context}] {msg}")

    def critical(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.critical(f"[{context}] {msg}")
