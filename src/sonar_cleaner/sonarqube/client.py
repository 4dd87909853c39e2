"""SonarQube API client."""

import logging
from urllib.parse import quote

from sonar_cleaner.cleanup.base import ProjectDeleter
from sonar_cleaner.config import CleanupConfig
from sonar_cleaner.http import HttpResult, HttpTransport

logger = logging.getLogger(__name__)


class SonarQubeClient(ProjectDeleter):
    """Client for the SonarQube project administration API."""

    def __init__(self, config: CleanupConfig, transport: HttpTransport) -> None:
        """Initialize the SonarQube client.

        Args:
            config: Application configuration
            transport: Open HTTP transport
        """
        self.config = config
        self.base_url = config.sonarqube_url
        self.transport = transport

    def delete_url(self, project_key: str) -> str:
        """Build the project deletion URL.

        Args:
            project_key: Project key to delete

        Returns:
            Absolute URL with the URL-encoded key as ``project`` parameter
        """
        return f"{self.base_url}/api/projects/delete?project={quote(project_key, safe='')}"

    async def delete_project(self, project_key: str) -> HttpResult:
        """Delete a SonarQube project.

        SonarQube answers 204 No Content on success.

        Args:
            project_key: Project key to delete

        Returns:
            Outcome of the delete request
        """
        url = self.delete_url(project_key)
        logger.debug(f"Deleting SonarQube project {project_key!r} via {url}")
        return await self.transport.post(url, self.config.sonarqube_token)
