"""Configuration for the Azure DevOps connection."""

import math
import os
from typing import Optional

DEFAULT_BASE_URL = "https://dev.azure.com"
DEFAULT_API_VERSION = "7.0"
DEFAULT_DELAY = 0.5


class DevOpsConfig:
    """Connection settings, read from environment variables unless given."""

    def __init__(
        self,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        delay: Optional[float] = None,
    ) -> None:
        """Initialize configuration, falling back to environment variables."""
        self.organization: Optional[str] = organization or os.getenv(
            "AZURE_DEVOPS_ORG"
        )
        self.project: Optional[str] = project or os.getenv("AZURE_DEVOPS_PROJECT")
        self.token: Optional[str] = token or os.getenv("AZURE_DEVOPS_PAT")
        self.base_url: str = (
            base_url or os.getenv("AZURE_DEVOPS_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self.api_version: str = api_version or os.getenv(
            "AZURE_DEVOPS_API_VERSION", DEFAULT_API_VERSION
        )
        if delay is None:
            delay = float(os.getenv("AZURE_DEVOPS_DELAY", DEFAULT_DELAY))
        self.delay: float = delay

    def is_configured(self) -> bool:
        """Check if all required settings are present."""
        return bool(self.organization and self.project and self.token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.organization:
            missing.append("AZURE_DEVOPS_ORG")
        if not self.project:
            missing.append("AZURE_DEVOPS_PROJECT")
        if not self.token:
            missing.append("AZURE_DEVOPS_PAT")

        if missing:
            raise ValueError(
                f"Settings required for Azure DevOps access: {', '.join(missing)}"
            )

        if not math.isfinite(self.delay) or self.delay < 0:
            raise ValueError(
                f"Delay must be a non-negative number of seconds, got {self.delay}"
            )

    @property
    def project_url(self) -> str:
        """Base URL of the configured project."""
        return f"{self.base_url}/{self.organization}/{self.project}"
