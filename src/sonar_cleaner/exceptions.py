"""Merge event exceptions."""


class InvalidMergeEventError(ValueError):
    """Merge event payload could not be understood."""
