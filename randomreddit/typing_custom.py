""" This module contains custom types used in the randomreddit package. """

from dataclasses import dataclass
from typing import Any, Optional
from enum import Enum

PostId = str
PostData = dict[str, Any]


@dataclass
class RedditUser:
    """ Reddit credentials of a script app, plus transport settings """
    username: str
    password: str
    client_id: str
    client_secret: str
    user_agent: Optional[str] = None
    retry_on_wait: bool = True
    retry_on_server_error: int = 5
    retry_delay: float = 5
    logs: bool = False
    log_level: Optional[int] = None


class FetchOutcome(Enum):
    """ Represents how a single GET attempt ended """
    SUCCESS = 1
    DENIED = 2
    TRANSIENT = 3
