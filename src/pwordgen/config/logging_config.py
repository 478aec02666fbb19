import logging
import os
import sys
import traceback
import pendulum

from pwordgen.config.config_pwordgen import LOG_FILE, VERSION


def setup_logging(log_file: str = LOG_FILE) -> None:

    if logging.getLogger().handlers:
        return  # already configured

    logging.basicConfig(
        filename=log_file,
        filemode="a",
        level=logging.ERROR,
        format="%(message)s",
    )

    sys.excepthook = log_uncaught_exceptions


def timestamp() -> str:
    """Current local time as an ISO-8601 string, used to stamp log lines."""
    return pendulum.now().to_iso8601_string()


def summarize_traceback(tb) -> str:
    """
    One line per frame, innermost first, file names without directories.
    """
    lines = [
        f'  File "{os.path.basename(frame.filename)}", line {frame.lineno}, in {frame.name}'
        for frame in traceback.extract_tb(tb)
    ]
    return "\n".join(reversed(lines)) if lines else "  <no traceback>"


def log_uncaught_exceptions(exctype, value, tb):
    error_msg = f"{exctype.__name__}: {value}"

    logging.error(
        f"[{timestamp()}] pwordgen {VERSION} uncaught exception: {error_msg}\n"
        f"Traceback (most recent call last):\n"
        f"{summarize_traceback(tb)}\n"
        f"{error_msg}\n"
    )

    print("\nError! Something went wrong.", file=sys.stderr)
    print(f"Details saved to {LOG_FILE}\n", file=sys.stderr)
