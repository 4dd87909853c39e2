"""Bitbucket Server integration for sonar-cleaner."""

from sonar_cleaner.bitbucket.client import BitbucketClient

__all__ = ["BitbucketClient"]
