"""Depth-first creation of a backlog hierarchy in Azure DevOps."""

import logging
import time
from collections.abc import Callable, Iterable

from ..config import DEFAULT_DELAY
from ..devops_client.client import DevOpsClient
from ..devops_client.models import WorkItemType
from .models import BacklogEpic, BacklogItem, CreatedItem, PopulationSummary

logger = logging.getLogger(__name__)


class BacklogPopulator:
    """Creates epics, issues and tasks one at a time, parents first."""

    def __init__(
        self,
        client: DevOpsClient,
        delay: float = DEFAULT_DELAY,
        on_created: Callable[[CreatedItem], None] | None = None,
    ):
        """Initialize the populator.

        Args:
            client: Client used for every creation call
            delay: Seconds to pause after each creation call
            on_created: Optional callback invoked after each created item
        """
        self.client = client
        self.delay = delay
        self.on_created = on_created

    @staticmethod
    def plan(
        epics: Iterable[BacklogEpic],
    ) -> list[tuple[WorkItemType, str, int]]:
        """List (kind, title, depth) in the order populate() creates them."""
        steps = []
        for epic in epics:
            steps.append((WorkItemType.EPIC, epic.title, 0))
            for issue in epic.issues:
                steps.append((WorkItemType.ISSUE, issue.title, 1))
                for task in issue.tasks:
                    steps.append((WorkItemType.TASK, task.title, 2))
        return steps

    def populate(self, epics: Iterable[BacklogEpic]) -> PopulationSummary:
        """Create every item of the backlog.

        The first WorkItemCreationError propagates unchanged; items created
        before it are left in place.
        """
        summary = PopulationSummary()
        for epic in epics:
            epic_id = self._create(summary, WorkItemType.EPIC, epic)
            for issue in epic.issues:
                issue_id = self._create(summary, WorkItemType.ISSUE, issue, epic_id)
                for task in issue.tasks:
                    self._create(summary, WorkItemType.TASK, task, issue_id)
        return summary

    def _create(
        self,
        summary: PopulationSummary,
        kind: WorkItemType,
        item: BacklogItem,
        parent_id: int | None = None,
    ) -> int:
        work_item = self.client.create_work_item(
            kind,
            item.title,
            description=item.description,
            tags=item.tags,
            parent_id=parent_id,
        )
        created = CreatedItem(
            kind=kind, title=item.title, id=work_item.id, parent_id=parent_id
        )
        summary.created.append(created)
        logger.info(f"Created {kind.value} #{work_item.id}: {item.title}")

        if self.on_created:
            self.on_created(created)

        # Rate limiting delay
        if self.delay > 0:
            time.sleep(self.delay)

        return work_item.id
