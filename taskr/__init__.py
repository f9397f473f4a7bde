"""taskr - task management domain model with pluggable repositories."""

__version__ = "0.1.0"
