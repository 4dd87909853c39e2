"""Abstract collaborators used by the cleanup orchestrator.

The orchestrator only depends on these interfaces, so tests and alternative
hosts can supply their own fetcher and deleter.
"""

from abc import ABC, abstractmethod

from sonar_cleaner.http.models import HttpResult


class DescriptorFetcher(ABC):
    """Retrieves the build descriptor of a repository."""

    @abstractmethod
    async def fetch_descriptor(self, project_key: str, repository_slug: str) -> str:
        """Fetch the raw build descriptor.

        Implementations must not raise on HTTP or transport failures.

        Args:
            project_key: Source control project key
            repository_slug: Repository slug

        Returns:
            Descriptor text, or an empty string if it could not be fetched
        """


class ProjectDeleter(ABC):
    """Deletes analysis projects."""

    @abstractmethod
    async def delete_project(self, project_key: str) -> HttpResult:
        """Request deletion of an analysis project.

        Implementations must not raise on HTTP or transport failures.

        Args:
            project_key: Analysis project key

        Returns:
            Outcome of the delete request
        """
