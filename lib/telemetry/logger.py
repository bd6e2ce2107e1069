"""Logging wiring shared by the services."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "info") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("apps").setLevel(level.upper())
    logging.getLogger("fastapi").setLevel(level.upper())
    logging.getLogger("uvicorn").setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
