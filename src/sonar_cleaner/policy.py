"""Protected branch policy."""

from sonar_cleaner.config import CleanupConfig


def is_protected(branch_name: str, config: CleanupConfig) -> bool:
    """Check whether a branch is configured as protected.

    Comparison is case-insensitive. Unknown branches are not protected.

    Args:
        branch_name: Branch display id
        config: Cleanup configuration

    Returns:
        True if the branch is protected
    """
    return branch_name.lower() in config.protected_branches
