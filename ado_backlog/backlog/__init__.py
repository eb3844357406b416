"""Backlog hierarchy definition and population."""

from .models import (
    BacklogEpic,
    BacklogIssue,
    BacklogTask,
    CreatedItem,
    PopulationSummary,
)
from .plan import AWS_INFRASTRUCTURE_BACKLOG, count_items
from .populator import BacklogPopulator

__all__ = [
    "AWS_INFRASTRUCTURE_BACKLOG",
    "BacklogEpic",
    "BacklogIssue",
    "BacklogPopulator",
    "BacklogTask",
    "CreatedItem",
    "PopulationSummary",
    "count_items",
]
