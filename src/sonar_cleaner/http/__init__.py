"""HTTP plumbing shared by the Bitbucket and SonarQube clients."""

from sonar_cleaner.http.models import HttpResult
from sonar_cleaner.http.transport import HttpTransport

__all__ = [
    "HttpResult",
    "HttpTransport",
]
