"""Console logging for chipcore runs."""

import time
import sys

# Level name -> (order, ANSI colour)
LEVELS = {
    "DEBUG": (0, "\033[36m"),
    "INFO": (1, "\033[32m"),
    "ERROR": (3, "\033[31m"),
}
RESET = "\033[0m"


class ConsoleLogger:
    """Levelled console logger used by ``run`` for start, halt and fault messages."""

    def __init__(
        self,
        name: str = "chipcore",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.min_order = LEVELS.get(log_level.upper(), LEVELS["INFO"])[0]
        self.use_colors = (
            use_colors and hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with elapsed time, level, and colours."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{LEVELS[level][1]}{level_str}{RESET}"

        return f"{timestamp}{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        level = level.upper()
        if LEVELS[level][0] >= self.min_order:
            print(self._format_message(level, message), flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def error(self, message: str):
        self.log("ERROR", message)
