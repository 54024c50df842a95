"""Terminal user interface toolkit for a fuzzy-finding Jira client."""

__version__ = "0.1.0"