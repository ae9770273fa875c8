""" This file contains helper functions for the randomreddit package. """

import logging
import random
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional, TypeVar
import tomllib

T = TypeVar("T")

DISTRIBUTION = "random-reddit"


def get_random_item_from(items: Optional[Sequence[T]]) -> Optional[T]:
    """ Returns a random item of the sequence, or None if there is nothing to pick from """
    if not items:
        return None
    return items[random.randrange(len(items))]


class NullLogger(logging.Logger):
    """ A logger that drops every record it is given """

    def __init__(self):
        super().__init__("random-reddit.null", logging.CRITICAL + 1)
        self.disabled = True


def get_version() -> str:
    """
    Returns the installed version of the package.
    A source checkout that was never installed falls back to its pyproject.toml.
    """
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        with open(pyproject, 'rb') as f:
            # noinspection PyTypeChecker
            return tomllib.load(f)['project']['version']
