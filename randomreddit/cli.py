""" This module contains the CLI for randomreddit. """

import json
import sys
from pathlib import Path
import logging

import click

from randomreddit.logger import RandomRedditLogger
from randomreddit.randomreddit import RandomReddit, AccessDeniedError, ExceededRetriesError, NoValidMediaError
from randomreddit.typing_custom import RedditUser
from randomreddit.utils import get_version


def _connect(ctx: click.Context, user_config: Path) -> RandomReddit:
    logger: RandomRedditLogger = ctx.obj["logger"]

    logger.debug("Reading user configuration")
    with open(user_config, encoding="utf-8") as f:
        config = json.load(f)
        user = RedditUser(**config)

    reddit = RandomReddit(user=user, logger=logger)
    if not reddit.logged_in():
        logger.error("Failed to log in to Reddit, check your credentials")
        sys.exit(1)
    logger.info("Accessing Reddit as user %s", user.username)
    return reddit


def _run(ctx: click.Context, action):
    logger: RandomRedditLogger = ctx.obj["logger"]
    try:
        return action()
    except (AccessDeniedError, ExceededRetriesError, NoValidMediaError) as e:
        logger.error(e)
        sys.exit(1)


@click.group()
@click.option(
    "--debug", "-d",
    is_flag = True,
    help = "Turn on debug mode.",
)
@click.version_option(get_version(), message="%(version)s")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """ Random posts and images from subreddits """
    ctx.ensure_object(dict)
    ctx.obj["logger"] = RandomRedditLogger(level=logging.DEBUG if debug else logging.WARNING)


@cli.command()
@click.argument("user_config", type = Path)
@click.argument("subreddits", nargs = -1, required = True)
@click.option("--retries", default = 10, show_default = True, help = "Maximum number of request attempts.")
@click.pass_context
def post(ctx: click.Context, user_config: Path, subreddits: tuple[str, ...], retries: int):
    """
    Prints a random post from one of SUBREDDITS as JSON

    USER_CONFIG is the path to a JSON file containing Reddit user credentials
    """
    reddit = _connect(ctx, user_config)
    result = _run(ctx, lambda: reddit.get_post(list(subreddits), retries))
    click.echo(json.dumps(result["data"] if result else None, indent=4))


@cli.command()
@click.argument("user_config", type = Path)
@click.argument("subreddits", nargs = -1, required = True)
@click.option("--retries", default = 10, show_default = True, help = "Maximum number of posts to try.")
@click.pass_context
def image(ctx: click.Context, user_config: Path, subreddits: tuple[str, ...], retries: int):
    """
    Prints the image URL of a random post from one of SUBREDDITS

    USER_CONFIG is the path to a JSON file containing Reddit user credentials
    """
    reddit = _connect(ctx, user_config)
    click.echo(_run(ctx, lambda: reddit.get_image(list(subreddits), retries)))


@cli.command("post-by-id")
@click.argument("user_config", type = Path)
@click.argument("subreddit")
@click.argument("post_id")
@click.option("--retries", default = 10, show_default = True, help = "Maximum number of request attempts.")
@click.pass_context
def post_by_id(ctx: click.Context, user_config: Path, subreddit: str, post_id: str, retries: int):
    """
    Prints the post POST_ID from SUBREDDIT as JSON

    USER_CONFIG is the path to a JSON file containing Reddit user credentials
    """
    reddit = _connect(ctx, user_config)
    click.echo(json.dumps(_run(ctx, lambda: reddit.get_post_by_id(post_id, subreddit, retries)), indent=4))
