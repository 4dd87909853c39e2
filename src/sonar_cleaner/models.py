"""Top-level models for sonar-cleaner."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sonar_cleaner.exceptions import InvalidMergeEventError


class MergeEvent(BaseModel):
    """A merged pull request, as reported by the hosting Bitbucket server."""

    model_config = ConfigDict(frozen=True)

    project_key: str = Field(description="Bitbucket project key (URL segment)")
    repository_slug: str = Field(description="Bitbucket repository slug (URL segment)")
    target_branch: str = Field(description="Display id of the branch merged into")
    source_branch: str = Field(description="Display id of the branch that was merged")
    project_name: str = Field(default="", description="Project display name, for logs")
    repository_name: str = Field(default="", description="Repository display name, for logs")

    @model_validator(mode="before")
    @classmethod
    def default_display_names(cls, data: Any) -> Any:
        """Fall back to key and slug when display names are not supplied.

        Args:
            data: Raw input values

        Returns:
            Input values with display names filled in
        """
        if isinstance(data, dict):
            data = dict(data)
            if not data.get("project_name"):
                data["project_name"] = data.get("project_key", "")
            if not data.get("repository_name"):
                data["repository_name"] = data.get("repository_slug", "")
        return data

    @property
    def log_context(self) -> str:
        """Human readable ``project/repo`` label used in log lines."""
        return f"{self.project_name}/{self.repository_name}"

    @classmethod
    def from_webhook_payload(cls, payload: dict[str, Any]) -> "MergeEvent":
        """Build an event from a Bitbucket ``pr:merged`` webhook payload.

        Args:
            payload: Decoded JSON body of the webhook

        Returns:
            Merge event

        Raises:
            InvalidMergeEventError: If a required element is missing
        """
        try:
            pull_request = payload["pullRequest"]
            to_ref = pull_request["toRef"]
            from_ref = pull_request["fromRef"]
            repository = to_ref["repository"]
            project = repository["project"]

            return cls(
                project_key=project["key"],
                project_name=project.get("name", ""),
                repository_slug=repository["slug"],
                repository_name=repository.get("name", ""),
                target_branch=to_ref["displayId"],
                source_branch=from_ref["displayId"],
            )
        except (KeyError, TypeError) as e:
            raise InvalidMergeEventError(f"Malformed merge payload, missing {e}") from e
