"""Models for the backlog hierarchy and population results."""

from pydantic import BaseModel, ConfigDict, Field

from ..devops_client.models import WorkItemType


class BacklogItem(BaseModel):
    """Fields shared by every level of the backlog."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Work item title")
    description: str | None = Field(None, description="Work item description")
    tags: tuple[str, ...] = Field(
        default_factory=tuple, description="Tags to attach, in display order"
    )


class BacklogTask(BacklogItem):
    """Leaf item of the backlog."""


class BacklogIssue(BacklogItem):
    """Second-level item, owning an ordered list of tasks."""

    tasks: tuple[BacklogTask, ...] = Field(default_factory=tuple)


class BacklogEpic(BacklogItem):
    """Top-level item, owning an ordered list of issues."""

    issues: tuple[BacklogIssue, ...] = Field(default_factory=tuple)


class CreatedItem(BaseModel):
    """Record of one work item created during a run."""

    kind: WorkItemType
    title: str
    id: int
    parent_id: int | None = None


class PopulationSummary(BaseModel):
    """Counts and ordered record of the items created by a run."""

    created: list[CreatedItem] = Field(default_factory=list)

    def count(self, kind: WorkItemType) -> int:
        return sum(1 for item in self.created if item.kind == kind)

    @property
    def epics(self) -> int:
        return self.count(WorkItemType.EPIC)

    @property
    def issues(self) -> int:
        return self.count(WorkItemType.ISSUE)

    @property
    def tasks(self) -> int:
        return self.count(WorkItemType.TASK)
