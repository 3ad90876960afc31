import logging

_PACKAGE = "qperceptron"

# Library modules stay silent until the application calls setup_logging
logging.getLogger(_PACKAGE).addHandler(logging.NullHandler())


def get_logger(name=None):
    if not name or name == "__main__":
        return logging.getLogger(_PACKAGE)
    if name != _PACKAGE and not name.startswith(_PACKAGE + "."):
        name = f"{_PACKAGE}.{name}"
    return logging.getLogger(name)

__all__ = ["get_logger"]
