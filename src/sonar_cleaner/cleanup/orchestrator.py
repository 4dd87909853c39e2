"""Cleanup of SonarQube branch projects after a pull request merge."""

import logging
from enum import Enum

from sonar_cleaner.cleanup.base import DescriptorFetcher, ProjectDeleter
from sonar_cleaner.config import CleanupConfig
from sonar_cleaner.keys import build_project_key
from sonar_cleaner.models import MergeEvent
from sonar_cleaner.policy import is_protected

logger = logging.getLogger(__name__)

DELETE_SUCCESS_STATUS = 204


class CleanupOutcome(str, Enum):
    """Terminal state of a merge event."""

    SKIPPED_UNPROTECTED_TARGET = "skipped-unprotected-target"
    SKIPPED_PROTECTED_SOURCE = "skipped-protected-source"
    DELETED = "deleted"
    DELETE_FAILED = "delete-failed"
    ERROR = "error"


class CleanupOrchestrator:
    """Decides whether a merge should delete a SonarQube project, and deletes it.

    Workflow per merge event:
    - Skip unless the target branch is protected
    - Fetch the repository's build descriptor
    - Build the project key from the descriptor and the source branch
    - Skip if the source branch is itself protected
    - Delete the project

    Failures end the current event only; nothing is raised to the caller.
    """

    def __init__(
        self,
        config: CleanupConfig,
        descriptor_fetcher: DescriptorFetcher,
        deleter: ProjectDeleter,
    ) -> None:
        """Initialize the cleanup orchestrator.

        Args:
            config: Application configuration
            descriptor_fetcher: Source of build descriptors
            deleter: SonarQube project deleter
        """
        self.config = config
        self.descriptor_fetcher = descriptor_fetcher
        self.deleter = deleter

    async def handle_merge(self, event: MergeEvent) -> CleanupOutcome:
        """Handle one merged pull request.

        Args:
            event: Merge event

        Returns:
            Terminal state reached for this event
        """
        try:
            return await self._handle_merge(event)
        except Exception:
            logger.exception(
                f"Error occurred while cleaning up after merge of '{event.source_branch}' "
                f"into '{event.target_branch}' for the repo '{event.log_context}'"
            )
            return CleanupOutcome.ERROR

    async def _handle_merge(self, event: MergeEvent) -> CleanupOutcome:
        target_branch = event.target_branch.lower()

        if not is_protected(target_branch, self.config):
            logger.info(
                f"Pull request target branch '{target_branch}' for the repo "
                f"'{event.log_context}' is not protected. No action taken."
            )
            return CleanupOutcome.SKIPPED_UNPROTECTED_TARGET

        # An empty descriptor still yields a key; see DESIGN.md
        descriptor = await self.descriptor_fetcher.fetch_descriptor(event.project_key, event.repository_slug)

        source_branch = event.source_branch.lower()
        project_key = build_project_key(descriptor, source_branch)

        if is_protected(source_branch, self.config):
            logger.info(
                f"Source branch '{source_branch}' for the repo '{event.log_context}' "
                "is protected. No deletion will be performed."
            )
            return CleanupOutcome.SKIPPED_PROTECTED_SOURCE

        logger.info(
            f"Attempting to delete SonarQube project '{project_key}' for branch "
            f"'{source_branch}' of the repo '{event.log_context}'."
        )
        result = await self.deleter.delete_project(project_key)

        if result.has_status(DELETE_SUCCESS_STATUS):
            logger.info(f"SonarQube project '{project_key}' deleted successfully.")
            return CleanupOutcome.DELETED

        logger.error(f"Failed to delete SonarQube project '{project_key}' ({result.describe()})")
        return CleanupOutcome.DELETE_FAILED


async def handle_merge(
    event: MergeEvent,
    config: CleanupConfig,
    descriptor_fetcher: DescriptorFetcher,
    deleter: ProjectDeleter,
) -> CleanupOutcome:
    """Handle one merged pull request with the given collaborators.

    Args:
        event: Merge event
        config: Application configuration
        descriptor_fetcher: Source of build descriptors
        deleter: SonarQube project deleter

    Returns:
        Terminal state reached for this event
    """
    return await CleanupOrchestrator(config, descriptor_fetcher, deleter).handle_merge(event)
