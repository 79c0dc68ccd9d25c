import logging
import sys

from pythonjsonlogger import jsonlogger

_HANDLER_NAME = "scribe-json"


def setup_logging():
    """
    Configures structured JSON logging for the service and returns the root logger.

    A single JSON stream handler is installed on the root logger and on the
    Uvicorn loggers so request logs and application logs share one format.
    Records carry timestamp, level, logger name, message, and the Datadog
    trace_id/span_id when ddtrace log injection is active.

    Safe to call from every module: the handler is installed only once.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    root_logger = logging.getLogger()
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return root_logger

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.set_name(_HANDLER_NAME)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(logging.INFO)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
