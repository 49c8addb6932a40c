"""Command-line interface for addrbook."""
