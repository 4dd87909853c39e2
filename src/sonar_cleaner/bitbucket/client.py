"""Bitbucket Server client for reading repository build descriptors."""

import logging
from urllib.parse import quote

from sonar_cleaner.cleanup.base import DescriptorFetcher
from sonar_cleaner.config import CleanupConfig
from sonar_cleaner.http import HttpTransport

logger = logging.getLogger(__name__)

POM_PATH = "pom.xml"


class BitbucketClient(DescriptorFetcher):
    """Fetches ``pom.xml`` from a Bitbucket Server repository."""

    def __init__(self, config: CleanupConfig, transport: HttpTransport) -> None:
        """Initialize the Bitbucket client.

        Args:
            config: Application configuration
            transport: Open HTTP transport
        """
        self.config = config
        self.base_url = config.bitbucket_url
        self.transport = transport

    def descriptor_url(self, project_key: str, repository_slug: str) -> str:
        """Build the browse URL of the repository's ``pom.xml``.

        Args:
            project_key: Bitbucket project key
            repository_slug: Repository slug

        Returns:
            Absolute URL
        """
        project = quote(project_key, safe="")
        repo = quote(repository_slug, safe="")
        return f"{self.base_url}/rest/api/1.0/projects/{project}/repos/{repo}/browse/{POM_PATH}"

    async def fetch_descriptor(self, project_key: str, repository_slug: str) -> str:
        """Fetch ``pom.xml`` content.

        Args:
            project_key: Bitbucket project key
            repository_slug: Repository slug

        Returns:
            Response body on HTTP 200, otherwise an empty string
        """
        url = self.descriptor_url(project_key, repository_slug)
        logger.debug(f"Fetching {POM_PATH} for {project_key}/{repository_slug} from {url}")

        result = await self.transport.get(url, self.config.bitbucket_token)

        if result.has_status(200):
            return result.body

        logger.error(f"Failed to fetch {POM_PATH} for {project_key}/{repository_slug}: {result.describe()}")
        return ""
