""" Random posts and images from subreddits through the Reddit API. """
