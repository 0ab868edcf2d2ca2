# logger_utils.py - logging messages and timing metrics for fuzzy_matcher

import os
import time
from datetime import datetime
from typing import Optional

# Default log file, relative to the working directory (can be overridden)
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "fuzzy_matcher.log")


class Log:
    """Lightweight logger: appends to a log file and echoes to the console."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: Optional[str] = None, use_color: bool = True, console: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.console = console

    def write(self, level: str, msg: str) -> str:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Returns the formatted line.
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if self.console:
            if self.use_color and level in self.COLORS:
                print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
            else:
                print(line)
        return line

    # Public logging methods
    def debug(self, msg: str) -> str:
        return self.write("DEBUG", msg)

    def info(self, msg: str) -> str:
        return self.write("INFO", msg)

    def warning(self, msg: str) -> str:
        return self.write("WARNING", msg)

    def error(self, msg: str) -> str:
        return self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> str:
        """
        Record a metric (timing, counts, sizes).
        Example: [2026-10-19 12:45:02] METRIC  | load words.txt: 0.123s
        """
        return self.write("METRIC", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure execution time of a code block:
            with log.time_block("load"):
                do_some_work()
        The elapsed seconds are recorded as a metric on exit.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")


_default: Optional[Log] = None


def get_logger() -> Log:
    """Shared Log instance (file only, no console echo) used by library code."""
    global _default
    if _default is None:
        _default = Log(console=False)
    return _default


def set_logger(log: Log) -> None:
    """Replace the shared Log instance (the CLI does this after reading config)."""
    global _default
    _default = log
