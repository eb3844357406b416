"""Populate Azure DevOps with a predefined AWS infrastructure backlog."""

__version__ = "0.1.0"
