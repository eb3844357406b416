"""CLI commands for creating the AWS infrastructure backlog in Azure DevOps."""

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..backlog.models import CreatedItem, PopulationSummary
from ..backlog.plan import AWS_INFRASTRUCTURE_BACKLOG, count_items
from ..backlog.populator import BacklogPopulator
from ..config import DevOpsConfig
from ..devops_client.client import DevOpsClient, WorkItemCreationError
from ..devops_client.models import WorkItemType
from .options import (
    API_VERSION_OPTION,
    DELAY_OPTION,
    DRY_RUN_OPTION,
    ORG_OPTION,
    PROJECT_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()

KIND_ICONS = {
    WorkItemType.EPIC: "👑",
    WorkItemType.ISSUE: "📌",
    WorkItemType.TASK: "✏️ ",
}

KIND_INDENT = {
    WorkItemType.EPIC: 0,
    WorkItemType.ISSUE: 1,
    WorkItemType.TASK: 2,
}


def _print_created(item: CreatedItem) -> None:
    indent = "  " * KIND_INDENT[item.kind]
    parent = f" (parent #{item.parent_id})" if item.parent_id is not None else ""
    console.print(
        f"{indent}{KIND_ICONS[item.kind]} [green]Created {item.kind.value} "
        f"#{item.id}[/green]: {escape(item.title)}{parent}"
    )


def _summary_table(summary: PopulationSummary) -> Table:
    table = Table(title="Population Summary")
    table.add_column("Kind", style="cyan")
    table.add_column("Created", justify="right", style="green")
    table.add_row("Epics", str(summary.epics))
    table.add_row("Issues", str(summary.issues))
    table.add_row("Tasks", str(summary.tasks))
    return table


def populate(
    org: str | None = ORG_OPTION,
    project: str | None = PROJECT_OPTION,
    token: str | None = TOKEN_OPTION,
    delay: float | None = DELAY_OPTION,
    api_version: str | None = API_VERSION_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Create the AWS infrastructure backlog in an Azure DevOps project.

    Epics, issues and tasks are created one at a time, depth first, with
    each child linked to the item created just before it at the level above.
    The run stops at the first failed call; items already created are kept.

    Examples:
        ado-backlog populate --org myorg --project Infra --token $PAT

        # Preview what would be created
        ado-backlog populate --org myorg --project Infra --dry-run

        # Slow down for a busy organization
        ado-backlog populate -o myorg -p Infra -t $PAT --delay 2
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s"
        )

    if not org:
        console.print("❌ [red]Error: --org is required[/red]")
        raise typer.Exit(1)

    if not project:
        console.print("❌ [red]Error: --project is required[/red]")
        raise typer.Exit(1)

    if not dry_run and not token:
        console.print("❌ [red]Error: --token is required[/red]")
        raise typer.Exit(1)

    try:
        config = DevOpsConfig(
            organization=org,
            project=project,
            token=token,
            api_version=api_version,
            delay=delay,
        )
        if not dry_run:
            config.validate()
    except ValueError as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    epic_count, issue_count, task_count = count_items(AWS_INFRASTRUCTURE_BACKLOG)

    params_table = Table(title="Population Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")
    params_table.add_row("Organization", config.organization or "")
    params_table.add_row("Project", config.project or "")
    params_table.add_row("API Version", config.api_version)
    params_table.add_row("Delay", f"{config.delay}s")
    params_table.add_row(
        "Items", f"{epic_count} epics, {issue_count} issues, {task_count} tasks"
    )
    console.print(params_table)

    if dry_run:
        console.print("\n📋 [blue]Planned work items:[/blue]")
        for kind, title, depth in BacklogPopulator.plan(AWS_INFRASTRUCTURE_BACKLOG):
            indent = "  " * depth
            console.print(f"{indent}{KIND_ICONS[kind]} {kind.value}: {escape(title)}")
        console.print("\n🔍 [yellow]Dry run - no work items were created[/yellow]")
        return

    try:
        console.print(
            f"🚀 [blue]Creating work items in {config.organization}/"
            f"{config.project}...[/blue]"
        )
        with DevOpsClient(config) as client:
            populator = BacklogPopulator(
                client, delay=config.delay, on_created=_print_created
            )
            summary = populator.populate(AWS_INFRASTRUCTURE_BACKLOG)

    except WorkItemCreationError as e:
        console.print(
            f"❌ [red]Failed to create {e.kind.value} '{escape(e.title)}'[/red]: "
            f"{escape(e.message)}"
        )
        console.print("Work items created before the failure were left in place.")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n❌ [yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(1)

    console.print()
    console.print(_summary_table(summary))
    console.print(
        f"✨ [green]Successfully created {len(summary.created)} work items![/green]"
    )


def show() -> None:
    """Show the built-in AWS infrastructure backlog."""
    tree = Tree("🗂️  AWS infrastructure backlog")
    for epic in AWS_INFRASTRUCTURE_BACKLOG:
        epic_node = tree.add(_tree_label(WorkItemType.EPIC, epic.title, epic.tags))
        for issue in epic.issues:
            issue_node = epic_node.add(
                _tree_label(WorkItemType.ISSUE, issue.title, issue.tags)
            )
            for task in issue.tasks:
                issue_node.add(_tree_label(WorkItemType.TASK, task.title, task.tags))

    console.print(tree)
    epic_count, issue_count, task_count = count_items(AWS_INFRASTRUCTURE_BACKLOG)
    console.print(f"📊 {epic_count} epics, {issue_count} issues, {task_count} tasks")


def _tree_label(kind: WorkItemType, title: str, tags: tuple[str, ...]) -> str:
    label = f"[bold]{kind.value}[/bold]: {escape(title)}"
    if tags:
        label += f" [dim]({escape(', '.join(tags))})[/dim]"
    return label
