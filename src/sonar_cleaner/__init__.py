"""Delete SonarQube branch projects when their pull requests merge."""

__version__ = "0.1.0"
