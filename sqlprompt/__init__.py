"""Interactive SQL prompt backed by a remote text-completion API."""

__version__ = "0.1.0"
