import logging

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name, level=logging.INFO):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Loggers are process-wide, so only attach the handler the first time
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
    return logger
