"""SonarQube project key derivation from Maven build descriptors."""

import re

from pydantic import BaseModel

_GROUP_ID_PATTERN = re.compile(r"<groupId>(.*?)</groupId>")
_ARTIFACT_ID_PATTERN = re.compile(r"<artifactId>(.*?)</artifactId>")
_BRANCH_SEPARATOR_PATTERN = re.compile(r"[/\s]")


class PomCoordinates(BaseModel):
    """Maven coordinates found in a ``pom.xml``."""

    group_id: str = ""
    artifact_id: str = ""


def _first_match(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def extract_pom_coordinates(descriptor_text: str) -> PomCoordinates:
    """Extract the first groupId and artifactId from a ``pom.xml``.

    The first occurrence wins, so a ``<parent>`` block declared before the
    project's own coordinates supplies them. Missing tags yield empty strings.

    Args:
        descriptor_text: Raw ``pom.xml`` content (may be empty)

    Returns:
        Extracted coordinates
    """
    return PomCoordinates(
        group_id=_first_match(_GROUP_ID_PATTERN, descriptor_text),
        artifact_id=_first_match(_ARTIFACT_ID_PATTERN, descriptor_text),
    )


def normalize_branch(branch_display_id: str) -> str:
    """Make a branch name usable as a project key segment.

    Args:
        branch_display_id: Branch display id

    Returns:
        Branch name with each slash and whitespace character replaced by a hyphen

    Examples:
        >>> normalize_branch("feature/login fix")
        'feature-login-fix'
    """
    return _BRANCH_SEPARATOR_PATTERN.sub("-", branch_display_id)


def build_project_key(descriptor_text: str, branch_display_id: str) -> str:
    """Build the SonarQube project key for a branch analysis.

    Format: ``{groupId}:{artifactId}:{normalized_branch}``. Parts that cannot
    be found are left empty rather than raising, e.g. ``::feature-x``.

    Args:
        descriptor_text: Raw ``pom.xml`` content
        branch_display_id: Source branch display id

    Returns:
        Project key
    """
    coordinates = extract_pom_coordinates(descriptor_text)
    return f"{coordinates.group_id}:{coordinates.artifact_id}:{normalize_branch(branch_display_id)}"
