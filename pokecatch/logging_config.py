import logging


def setup_logging(level: str = 'INFO') -> None:
    """Attach a console handler to the root logger.

    Calling it again is a no-op, so tests and repeated `create_app` calls
    don't stack handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    root.addHandler(handler)
