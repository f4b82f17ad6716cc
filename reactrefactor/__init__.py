"""Pattern-based analysis and mechanical refactoring for React components."""

__version__ = "0.1.0"
