"""addrbook - a small personal address book."""

__version__ = "0.1.0"
