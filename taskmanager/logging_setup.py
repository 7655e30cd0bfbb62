import logging
import sys

# Third-party loggers that only reach the console at WARNING and above.
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "passlib")


def setup_logging(level: str = "INFO") -> None:
    """Configure a single stderr handler on the root logger.

    Safe to call more than once; existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
