""" This module contains the main RandomReddit class. """

import logging
import re
from collections.abc import Sequence
from typing import Any, Optional
from logging import Logger

import requests
from prawcore import PrawcoreException

from randomreddit.httpclient import RetryLimitExceededException
from randomreddit.logger import RandomRedditLogger
from randomreddit.redditapi import RedditAPI
from randomreddit.typing_custom import FetchOutcome, PostData, PostId, RedditUser
from randomreddit.utils import get_random_item_from


class AccessDeniedError(Exception):
    """ Raised when Reddit refuses access to the requested resource. """

    def __init__(self, message: str = "Access denied to Reddit API!"):
        super().__init__(message)


class ExceededRetriesError(Exception):
    """ Raised when the retry budget of a request is used up. """

    def __init__(self, message: str = "Request retries limits exceeded!"):
        super().__init__(message)


class NoValidMediaError(Exception):
    """ Raised when a gallery post has no valid image to pick. """


class RandomReddit:
    """
    Random posts and images from subreddits.

    Usage:
    1. Create an instance with the Reddit credentials of a script app
    2. Call ``get_post()``, ``get_image()`` or ``get_post_by_id()``
    """
    _default_logger_level = logging.WARNING
    _image_pattern = re.compile(r"(jpe?g|png|gif)")

    _reddit: RedditAPI
    _logger: Logger

    def __init__(self, user: RedditUser, logger: Logger | None = None):
        if logger is None:
            level = self._default_logger_level if user.log_level is None else user.log_level
            logger = RandomRedditLogger(level=level)
        self._logger = logger
        self._reddit = RedditAPI(user, self._logger)

    def logged_in(self) -> bool:
        """ Returns True if the user credentials are correct, False otherwise. """
        return self._reddit.logged_in()

    def get_post(self, subreddit: str | Sequence[str], retry_limit: int = 10) -> Optional[PostData]:
        """
        Returns a random post from the subreddit, or from one random subreddit of a list.
        The post is a listing child, i.e. ``{"kind": "t3", "data": {...}}``.
        """
        picked_sub = subreddit if isinstance(subreddit, str) else get_random_item_from(subreddit)
        if picked_sub is None:
            self._logger.warning("No subreddit to pick a post from")
            return None

        _, response = self._get(f"/r/{picked_sub}/random?count=50", retry_limit)
        return get_random_item_from(self._listing_children(response))

    def get_image(self, subreddit: str | Sequence[str], retry_limit: int = 10) -> str:
        """
        Returns the image URL of a random post from the subreddit.
        Posts without an image are skipped until one has it or ``retry_limit`` posts were tried.
        """
        retries = 0
        post: Optional[PostData] = None
        while retries < retry_limit:
            # The inner request keeps its own retry budget.
            post = self.get_post(subreddit)
            url = self._post_url(post)
            if url is not None and self._image_pattern.search(url):
                self._logger.debug("Got an image! %s", url)
                break

            retries += 1
            if retries == retry_limit:
                raise ExceededRetriesError("No image URL found! Request retries limits exceeded!")
            self._logger.warning("No image URL found! Repeating the process...")
        else:
            raise ExceededRetriesError("No image URL found! Request retries limits exceeded!")

        if post["data"].get("is_gallery"):
            return self._get_random_image_from_gallery(post)
        # imgur `gifv` links are short videos, their `gif` counterpart is the image
        return post["data"]["url"].replace("gifv", "gif")

    def get_post_by_id(self, post_id: PostId, subreddit: str, retry_limit: int = 10) -> Optional[PostData]:
        """ Returns the data of the post with given ID36 from the subreddit. """
        _, response = self._get(f"/r/{subreddit}/comments/{post_id}", retry_limit)
        children = self._listing_children(response)
        if not children:
            return None
        return children[0].get("data")

    @staticmethod
    def _get_random_image_from_gallery(post: PostData) -> str:
        media_metadata = post["data"].get("media_metadata") or {}
        valid_images = [image for image in media_metadata.values() if image.get("status") == "valid"]
        image = get_random_item_from(valid_images)
        if image is None:
            raise NoValidMediaError(f"Gallery post {post['data'].get('id')} has no valid media")
        return image["s"]["u"].replace("&amp;", "&")

    @staticmethod
    def _listing_children(payload: Any) -> list[PostData]:
        # Random posts come back as [post listing, comments listing], plain listings as a single object
        listing = payload[0] if isinstance(payload, list) and payload else payload
        if not isinstance(listing, dict):
            return []
        return (listing.get("data") or {}).get("children") or []

    @staticmethod
    def _post_url(post: Optional[PostData]) -> Optional[str]:
        if not post:
            return None
        url = post.get("data", {}).get("url")
        return url if isinstance(url, str) else None

    def _get(self, endpoint: str, retry_limit: int = 10) -> tuple[int, Any]:
        retries = 0
        while retries < retry_limit:
            self._logger.debug("Trying to GET %s. Retries: %d", endpoint, retries)
            outcome, response = self._attempt(endpoint)

            match outcome:
                case FetchOutcome.SUCCESS:
                    return response
                case FetchOutcome.DENIED:
                    raise AccessDeniedError()

            retries += 1
            if retries != retry_limit:
                self._logger.warning("GET %s. Retrying", endpoint)

        self._logger.error("GET %s", endpoint)
        raise ExceededRetriesError()

    def _attempt(self, endpoint: str) -> tuple[FetchOutcome, Optional[tuple[int, Any]]]:
        try:
            response = self._reddit.get(endpoint)
        except (requests.RequestException, RetryLimitExceededException, PrawcoreException) as e:
            self._logger.debug(e)
            return FetchOutcome.TRANSIENT, None

        # The transport answers None once Reddit refused access twice in a row
        if response is None or response[0] == 403:
            return FetchOutcome.DENIED, response
        if response[0] == 200:
            return FetchOutcome.SUCCESS, response
        return FetchOutcome.TRANSIENT, response
