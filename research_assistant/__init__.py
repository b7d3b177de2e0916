"""Research assistant: document search, relevance ranking and cited reports."""

__version__ = "0.1.0"
