import logging

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s'


def setup_logging(level: str | int = "INFO") -> None:
    """
    Route jsonmapper warnings and errors to the console.

    The root handler is only installed when none exists yet, the
    jsonmapper logger level is always applied.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("jsonmapper").setLevel(level)
