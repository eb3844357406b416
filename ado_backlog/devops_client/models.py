"""Pydantic models for Azure DevOps work item data structures.

These models map to the Azure DevOps work item tracking REST API.
API Reference: https://learn.microsoft.com/en-us/rest/api/azure/devops/wit/work-items
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

HIERARCHY_REVERSE = "System.LinkTypes.Hierarchy-Reverse"
TAG_SEPARATOR = "; "


class WorkItemType(str, Enum):
    """Work item kinds of the Basic process, from top level down."""

    EPIC = "Epic"
    ISSUE = "Issue"
    TASK = "Task"


class PatchOperation(BaseModel):
    """A single JSON Patch operation in a work item request body.

    API Reference: https://learn.microsoft.com/en-us/rest/api/azure/devops/wit/work-items/create
    """

    op: str = Field("add", description="Patch operation: add, replace, remove, test")
    path: str = Field(..., description="Target path, e.g. /fields/System.Title")
    value: Any = Field(None, description="Value to apply at the path")


class WorkItemRelation(BaseModel):
    """Link from a work item to another resource."""

    rel: str = Field(..., description="Link type reference name")
    url: str = Field(..., description="REST URL of the linked work item")
    attributes: dict[str, Any] | None = Field(
        None, description="Optional link attributes such as a comment"
    )


class WorkItem(BaseModel):
    """Work item as returned by the create endpoint.

    Maps to the Azure DevOps WorkItem object; only the parts this tool reads
    are modelled.
    """

    id: int = Field(..., description="Identifier assigned by the server")
    rev: int | None = Field(None, description="Revision number")
    url: str | None = Field(None, description="REST URL of the work item")
    fields: dict[str, Any] = Field(
        default_factory=dict, description="Field reference name to value"
    )
    relations: list[WorkItemRelation] = Field(
        default_factory=list, description="Links to other work items"
    )

    @property
    def title(self) -> str | None:
        """Title of the work item, if the server echoed it."""
        return self.fields.get("System.Title")


def build_patch_document(
    title: str,
    description: str | None = None,
    tags: list[str] | set[str] | tuple[str, ...] | None = None,
    parent_url: str | None = None,
) -> list[PatchOperation]:
    """Build the JSON Patch body for creating a work item.

    Description and tags are only included when present. Tags are joined into
    the single separator-delimited string Azure DevOps expects.
    """
    operations = [PatchOperation(path="/fields/System.Title", value=title)]

    if description:
        operations.append(
            PatchOperation(path="/fields/System.Description", value=description)
        )

    if tags:
        if isinstance(tags, (set, frozenset)):
            tags = sorted(tags)
        operations.append(
            PatchOperation(path="/fields/System.Tags", value=TAG_SEPARATOR.join(tags))
        )

    if parent_url:
        operations.append(
            PatchOperation(
                path="/relations/-",
                value={"rel": HIERARCHY_REVERSE, "url": parent_url},
            )
        )

    return operations
