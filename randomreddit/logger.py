""" This module contains custom logging classes for randomreddit. """

import logging
from copy import copy


class RandomRedditFormatter(logging.Formatter):
    """ Puts the level name in the color of its severity """
    _LEVEL_COLORS = {
        logging.DEBUG: 34,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 31,
    }

    _use_color: bool

    def __init__(self, use_color: bool = True):
        super().__init__('%(asctime)s [%(name)s][%(levelname)s]: %(message)s')
        self._use_color = use_color

    def format(self, record: logging.LogRecord):
        code = self._LEVEL_COLORS.get(record.levelno)
        if not self._use_color or code is None:
            return super().format(record)
        # a copy, so other handlers of the same record stay uncolored
        colored = copy(record)
        colored.levelname = f"\x1b[{code}m{record.levelname}\x1b[0m"
        return super().format(colored)


class RandomRedditLogger(logging.Logger):
    """ Console logger for randomreddit, quiet below WARNING unless told otherwise """

    def __init__(self, level=logging.WARNING, use_color: bool = True):
        super().__init__("random-reddit", level)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(RandomRedditFormatter(use_color=use_color))
        self.addHandler(console_handler)
