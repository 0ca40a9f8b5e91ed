import os
import sys
import time
from typing import Optional


class StatusLogger:
    """
    Shows start_msg on stderr while the block runs.
    On success, the line is cleared or replaced by finish_msg.
    """

    def __init__(self, start_msg: str, finish_msg: Optional[str] = None, suppress_log: bool = False):
        self.start_msg = start_msg
        self.finish_msg = finish_msg
        self.suppress_log = suppress_log

    def __enter__(self):
        if not self.suppress_log:
            sys.stderr.write("\r" + self.start_msg)
            sys.stderr.flush()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self.suppress_log:
            return
        if exc_type is not None:
            # Keep the status line, so it is clear which step failed.
            sys.stderr.write(os.linesep)
        elif self.finish_msg is None:
            sys.stderr.write("\r\033[K\r")
        else:
            sys.stderr.write("\r\033[K" + self._finish_line() + os.linesep)
        sys.stderr.flush()

    def _finish_line(self) -> str:
        return self.finish_msg


class TimedStatusLogger(StatusLogger):
    start_time: int

    def __enter__(self):
        self.start_time = time.perf_counter_ns()
        return super().__enter__()

    def _finish_line(self) -> str:
        elapsed_secs = (time.perf_counter_ns() - self.start_time) / 1e9
        return f"Took {elapsed_secs:.3f}s: " + self.finish_msg
