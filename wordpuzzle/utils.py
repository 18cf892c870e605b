import re

import logging
logger = logging.getLogger()

# leading integer, the way a browser's parseInt reads it: '12abc' -> 12
_leading_int = re.compile(r'\s*([+-]?[0-9]+)')

DEFAULT_MIN = 1
DEFAULT_MAX = None  # unbounded

def parse_bound(text, default=None):
    """
    convert raw bound text into an int, or `default` if there is no number
    in it. never raises, malformed text just means "bound absent".
    """
    if text is None:
        return default

    if isinstance(text, int):
        return text

    m = _leading_int.match(text)
    if not m:
        if text.strip():
            logger.debug(f"ignoring malformed bound: {text!r}")
        return default

    return int(m.group(1))

def parse_bounds(min_text, max_text):
    """
    (min, max) for the engine: min defaults to 1, max to unbounded
    """
    return (
        parse_bound(min_text, DEFAULT_MIN),
        parse_bound(max_text, DEFAULT_MAX),
    )

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
