"""Azure DevOps work item client using httpx."""

import base64
import logging

import httpx
from pydantic import ValidationError

from ..config import DevOpsConfig
from .models import WorkItem, WorkItemType, build_patch_document

logger = logging.getLogger(__name__)

PATCH_CONTENT_TYPE = "application/json-patch+json"


class DevOpsClientError(RuntimeError):
    """Base error for Azure DevOps API failures."""


class WorkItemCreationError(DevOpsClientError):
    """Raised when a work item could not be created."""

    def __init__(self, kind: WorkItemType, title: str, message: str):
        self.kind = kind
        self.title = title
        self.message = message
        super().__init__(f"Failed to create {kind.value} '{title}': {message}")


class DevOpsClient:
    """Azure DevOps work item tracking client with Basic authentication."""

    def __init__(
        self,
        config: DevOpsConfig | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        """Initialize Azure DevOps client.

        Args:
            config: Connection settings. If None, reads from environment
                variables.
            http_client: Optional preconfigured httpx client. It is left open
                when this client is closed.
            timeout: Request timeout in seconds for the default httpx client.
        """
        self.config = config or DevOpsConfig()
        if not self.config.is_configured():
            raise ValueError(
                "Azure DevOps organization, project and personal access token "
                "are required."
            )

        self._owns_http_client = http_client is None
        self.http = http_client or httpx.Client(timeout=timeout)
        self.headers = {
            "Authorization": self._basic_auth(self.config.token or ""),
            "Content-Type": PATCH_CONTENT_TYPE,
            "Accept": "application/json",
        }

    @staticmethod
    def _basic_auth(token: str) -> str:
        """Build the Basic header for a personal access token (empty user)."""
        encoded = base64.b64encode(f":{token}".encode()).decode()
        return f"Basic {encoded}"

    def work_item_url(self, work_item_id: int) -> str:
        """REST URL of an existing work item, as used in relation links."""
        return f"{self.config.project_url}/_apis/wit/workItems/{work_item_id}"

    def _create_url(self, kind: WorkItemType) -> str:
        return f"{self.config.project_url}/_apis/wit/workitems/${kind.value}"

    def create_work_item(
        self,
        kind: WorkItemType,
        title: str,
        description: str | None = None,
        tags: list[str] | set[str] | tuple[str, ...] | None = None,
        parent_id: int | None = None,
    ) -> WorkItem:
        """Create a work item, optionally linked under a parent.

        Args:
            kind: Work item type to create
            title: Work item title
            description: Optional HTML/plain description
            tags: Optional tags, sent as a single "; "-separated string
            parent_id: Identifier of the parent work item, if any

        Returns:
            The created WorkItem with its assigned identifier

        Raises:
            WorkItemCreationError: On transport errors, non-success responses
                or an unreadable response body. Nothing is retried.
        """
        parent_url = self.work_item_url(parent_id) if parent_id is not None else None
        document = build_patch_document(title, description, tags, parent_url)
        url = self._create_url(kind)

        logger.debug(f"POST {url} ({kind.value}: {title})")
        try:
            response = self.http.post(
                url,
                params={"api-version": self.config.api_version},
                headers=self.headers,
                json=[operation.model_dump() for operation in document],
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = e.response.text.strip() or e.response.reason_phrase
            logger.error(
                f"Creating {kind.value} '{title}' failed with "
                f"HTTP {e.response.status_code}: {detail}"
            )
            raise WorkItemCreationError(
                kind, title, f"HTTP {e.response.status_code}: {detail}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Creating {kind.value} '{title}' failed: {e}")
            raise WorkItemCreationError(kind, title, str(e)) from e

        try:
            work_item = WorkItem.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise WorkItemCreationError(
                kind, title, f"Unexpected response body: {e}"
            ) from e

        logger.debug(f"Created {kind.value} #{work_item.id}: {title}")
        return work_item

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self.http.close()

    def __enter__(self) -> "DevOpsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
