"""SonarQube API integration for sonar-cleaner."""

from sonar_cleaner.sonarqube.client import SonarQubeClient

__all__ = ["SonarQubeClient"]
