import logging
import sys


class CustomHandler(logging.Handler):
    """Logging handler that writes an empty line for empty log messages,
    otherwise formats the message as usual.
    """

    def __init__(self, stream=None, filename=None):
        super().__init__()
        if filename is not None:
            self._should_close = True
            self.stream = open(filename, "a", encoding="utf-8")
        else:
            self._should_close = False
            self.stream = stream if stream is not None else sys.stdout

    def emit(self, record):
        try:
            msg = record.getMessage()
            if msg == "":
                self.stream.write("\n")
            else:
                self.stream.write(self.format(record) + "\n")
            self.flush()
        except Exception:
            self.handleError(record)

    def flush(self):
        if self.stream and hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self):
        if self._should_close:
            self.stream.close()
            self._should_close = False
        super().close()


def get_logger(name="tractseed", filename=None, force=False):
    """Return a logger instance configured for tractseed.

    Parameters
    ----------
    name : str
        The logger name.
    filename : str, Path or None, optional
        If provided, log messages will also be saved to this file. If ``None``,
        logs are sent to stdout.
    force : bool, optional
        If True, existing handlers attached to the logger will be removed
        and replaced with a new handler. This allows reconfiguration of the
        logger even if it was already set up.

    Returns
    -------
    _logger : logging.Logger
        Configured logger.
    """

    _logger = logging.getLogger(name)
    if force or not _logger.hasHandlers():
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
            handler.close()
        if filename:
            handler = CustomHandler(filename=filename)
        else:
            handler = CustomHandler(stream=sys.stdout)
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            "[%(asctime)s][%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        _logger.addHandler(handler)
        _logger.setLevel(logging.INFO)
        _logger.propagate = False
    return _logger


def configure_logger(
    level=logging.INFO,
    fmt="[%(asctime)s][%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    filename=None,
):
    """Reconfigure the root logger.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.INFO).
    fmt : str, optional
        Log message format.
    datefmt : str, optional
        Date format for log messages.
    filename : str, Path or None, optional
        If provided, log messages will also be saved to this file. If ``None``,
        logs are sent to stdout.
    """

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    if filename:
        handler = CustomHandler(filename=filename)
    else:
        handler = CustomHandler(stream=sys.stdout)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)


logger = get_logger()
