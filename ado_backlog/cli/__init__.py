"""Command-line interface for ado-backlog."""
