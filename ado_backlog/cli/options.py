"""Shared CLI option definitions.

Connection options fall back to environment variables so that tokens do not
have to appear on the command line.
"""

import typer

ORG_OPTION = typer.Option(
    None,
    "--org",
    "-o",
    envvar="AZURE_DEVOPS_ORG",
    help="Azure DevOps organization name",
)

PROJECT_OPTION = typer.Option(
    None,
    "--project",
    "-p",
    envvar="AZURE_DEVOPS_PROJECT",
    help="Azure DevOps project name",
)

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    envvar="AZURE_DEVOPS_PAT",
    help="Personal access token (defaults to AZURE_DEVOPS_PAT env var)",
)

DELAY_OPTION = typer.Option(
    None,
    "--delay",
    help="Pause after each creation call in seconds (default 0.5)",
)

API_VERSION_OPTION = typer.Option(
    None, "--api-version", help="Work item tracking REST API version (default 7.0)"
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Show the items that would be created and exit"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
