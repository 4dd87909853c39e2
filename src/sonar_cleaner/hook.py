"""Entry point for the hosting server's post-merge trigger."""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from sonar_cleaner.bitbucket import BitbucketClient
from sonar_cleaner.cleanup import CleanupOrchestrator, CleanupOutcome
from sonar_cleaner.config import CleanupConfig, load_config
from sonar_cleaner.exceptions import InvalidMergeEventError
from sonar_cleaner.http import HttpTransport
from sonar_cleaner.models import MergeEvent
from sonar_cleaner.sonarqube import SonarQubeClient

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # Suppress per-request httpx logs unless in verbose mode
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


class MergeHook:
    """Post-merge hook wiring configuration, HTTP clients and the orchestrator.

    Configuration is loaded once, when the hook is created. Use as an async
    context manager so the shared HTTP connection pool is closed on exit::

        async with MergeHook() as hook:
            await hook.on_webhook(payload)
    """

    def __init__(
        self,
        config: CleanupConfig | None = None,
        env_file: str | Path | None = None,
    ) -> None:
        """Initialize the hook.

        Args:
            config: Ready configuration; loaded from the environment if omitted
            env_file: Optional custom env file used when loading configuration
        """
        self.config = config if config is not None else load_config(env_file)
        self.transport = HttpTransport()
        self.orchestrator = CleanupOrchestrator(
            self.config,
            BitbucketClient(self.config, self.transport),
            SonarQubeClient(self.config, self.transport),
        )

    async def __aenter__(self) -> "MergeHook":
        """Async context manager entry.

        Returns:
            Self
        """
        await self.transport.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type
            exc_val: Exception value
            exc_tb: Exception traceback
        """
        await self.transport.__aexit__(exc_type, exc_val, exc_tb)

    async def on_merge(self, event: MergeEvent) -> CleanupOutcome:
        """Handle a merged pull request.

        Args:
            event: Merge event

        Returns:
            Terminal state reached for this event
        """
        return await self.orchestrator.handle_merge(event)

    async def on_webhook(self, payload: dict[str, Any]) -> CleanupOutcome:
        """Handle a Bitbucket ``pr:merged`` webhook payload.

        Args:
            payload: Decoded JSON body of the webhook

        Returns:
            Terminal state reached for this event, ``ERROR`` for malformed payloads
        """
        try:
            event = MergeEvent.from_webhook_payload(payload)
        except InvalidMergeEventError as e:
            logger.error(f"Ignoring merge webhook: {e}")
            return CleanupOutcome.ERROR

        return await self.on_merge(event)
