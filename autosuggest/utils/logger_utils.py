# logger_utils.py - for logging messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files go unless configured otherwise
LOG_DIR = "logs"

# Path to the default log file, can be overriden via Log.configure()
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autosuggest.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight process-wide logger for writing messages and tracking metrics.
    Every entry is appended to the log file as:
        [YYYY-MM-DD HH:MM:SS] LEVEL   | message
    and optionally echoed to the console in color.
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path: Optional[str] = DEFAULT_LOG_PATH
    echo = False
    use_color = True
    level = "INFO"

    @classmethod
    def configure(cls, path=..., echo=None, level=None, use_color=None):
        """
        Adjust logger settings. path=None disables the log file entirely.
        Unknown level names raise ValueError.
        """
        if path is not ...:
            cls.path = path
        if echo is not None:
            cls.echo = bool(echo)
        if use_color is not None:
            cls.use_color = bool(use_color)
        if level is not None:
            level = level.upper()
            if level not in LEVELS:
                raise ValueError(f"unknown log level: {level}")
            cls.level = level

    @classmethod
    def write(cls, msg: str, level: str = "INFO"):
        """Append a log message (below-threshold levels are dropped)."""
        if LEVELS.get(level, 20) < LEVELS[cls.level]:
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if cls.path:
            folder = os.path.dirname(cls.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(cls.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        if cls.echo:
            if cls.use_color and level in cls.COLORS:
                print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
            else:
                print(line)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str):
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str):
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str):
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str):
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: suggest latency: 0.0004s
        """
        cls.write(f"{tag}: {value}{unit}", "DEBUG")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("seed"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record how long the block took as a metric."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
