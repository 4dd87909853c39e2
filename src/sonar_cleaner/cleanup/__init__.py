"""Merge-triggered cleanup of SonarQube branch projects."""

from sonar_cleaner.cleanup.base import DescriptorFetcher, ProjectDeleter
from sonar_cleaner.cleanup.orchestrator import (
    CleanupOrchestrator,
    CleanupOutcome,
    handle_merge,
)

__all__ = [
    "CleanupOrchestrator",
    "CleanupOutcome",
    "DescriptorFetcher",
    "ProjectDeleter",
    "handle_merge",
]
