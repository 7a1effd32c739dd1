"""lendctl — library lending rules and circulation workflow."""

__version__ = "0.1.0"
