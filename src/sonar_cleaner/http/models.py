"""HTTP result models."""

from pydantic import BaseModel, Field


class HttpResult(BaseModel):
    """Outcome of a single HTTP exchange.

    Transport failures are reported with ``status_code=None`` and an ``error``
    message instead of an exception.
    """

    status_code: int | None = Field(default=None, description="HTTP status, None if no response")
    body: str = Field(default="", description="Response body text")
    error: str | None = Field(default=None, description="Transport error message")

    @property
    def transport_failed(self) -> bool:
        """Check if no response was received.

        Returns:
            True if the request never produced an HTTP response
        """
        return self.status_code is None

    def has_status(self, status_code: int) -> bool:
        """Check for a specific response status.

        Args:
            status_code: Expected HTTP status

        Returns:
            True if a response with that status was received
        """
        return self.status_code == status_code

    def describe(self) -> str:
        """Short description for log lines."""
        if self.transport_failed:
            return f"transport error: {self.error}"
        return f"HTTP {self.status_code}: {self.body}"
