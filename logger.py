import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from settings import log_level, log_dir

LOGGER_NAME = "cupcake"


def setup_logger() -> logging.Logger:
    """
    Configure the shared "cupcake" logger.

    - Console output always
    - Daily rotating file when CUPCAKE_LOG_DIR is set (7 days kept)
    - Safe to call on every Streamlit rerun
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level())

    # Streamlit reruns the script on every interaction
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    directory = log_dir()
    if directory:
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path / "cupcake.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logger initialized")
    return logger
