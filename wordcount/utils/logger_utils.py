# logger_utils.py - logging setup and timing helper
# Log records go to stderr; stdout is reserved for report output.

import logging
import sys
import time

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "wordcount-stderr"

log = logging.getLogger("wordcount")


def configure_logging(level="WARNING"):
    """
    Give the package logger exactly one stderr handler and set its level.
    A handler left from an earlier call is dropped and replaced, since the
    stream it captured may have been closed since (e.g. a swapped sys.stderr).
    """
    for old in [h for h in log.handlers if h.get_name() == _HANDLER_NAME]:
        log.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    log.addHandler(handler)
    log.setLevel(level.upper() if isinstance(level, str) else level)
    return log


def time_block(label):
    """
    Wall-clock a phase of the run, e.g. ``with time_block("counting"): ...``.
    On exit an INFO record "<label> done in <seconds>s" is emitted; the
    elapsed seconds are also kept on the returned object as ``elapsed``.
    """
    return _Timer(label)


class _Timer:
    def __init__(self, label):
        self.label = label
        self.elapsed = 0.0
        self._t0 = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self._t0
        log.info("%s done in %.3fs", self.label, self.elapsed)
