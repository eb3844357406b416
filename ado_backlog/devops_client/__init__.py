"""Azure DevOps client package for work item creation."""

from .client import DevOpsClient, DevOpsClientError, WorkItemCreationError
from .models import PatchOperation, WorkItem, WorkItemType, build_patch_document

__all__ = [
    "DevOpsClient",
    "DevOpsClientError",
    "WorkItemCreationError",
    "PatchOperation",
    "WorkItem",
    "WorkItemType",
    "build_patch_document",
]
