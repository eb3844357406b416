"""Tests for Azure DevOps configuration."""

import os
from unittest.mock import patch

import pytest

from ado_backlog.config import DevOpsConfig


class TestDevOpsConfig:
    """Test DevOpsConfig class."""

    @patch.dict(
        os.environ,
        {
            "AZURE_DEVOPS_ORG": "envorg",
            "AZURE_DEVOPS_PROJECT": "envproject",
            "AZURE_DEVOPS_PAT": "envtoken",
            "AZURE_DEVOPS_DELAY": "1.5",
        },
        clear=True,
    )
    def test_reads_environment(self) -> None:
        """Test settings fall back to environment variables."""
        config = DevOpsConfig()

        assert config.organization == "envorg"
        assert config.project == "envproject"
        assert config.token == "envtoken"
        assert config.delay == 1.5
        assert config.is_configured()

    @patch.dict(os.environ, {"AZURE_DEVOPS_ORG": "envorg"}, clear=True)
    def test_arguments_override_environment(self) -> None:
        """Test explicit arguments win over environment variables."""
        config = DevOpsConfig(organization="argorg", project="p", token="t")

        assert config.organization == "argorg"

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        """Test default base URL, API version and delay."""
        config = DevOpsConfig(organization="org", project="proj", token="t")

        assert config.base_url == "https://dev.azure.com"
        assert config.api_version == "7.0"
        assert config.delay == 0.5
        assert config.project_url == "https://dev.azure.com/org/proj"

    @patch.dict(os.environ, {}, clear=True)
    def test_base_url_trailing_slash_stripped(self) -> None:
        """Test base URL is normalized."""
        config = DevOpsConfig(
            organization="org",
            project="proj",
            token="t",
            base_url="https://ado.example.com/tfs/",
        )

        assert config.project_url == "https://ado.example.com/tfs/org/proj"

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_lists_missing_settings(self) -> None:
        """Test validation names every missing setting."""
        config = DevOpsConfig(organization="org")

        assert not config.is_configured()
        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "AZURE_DEVOPS_PROJECT" in message
        assert "AZURE_DEVOPS_PAT" in message
        assert "AZURE_DEVOPS_ORG" not in message

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_rejects_negative_delay(self) -> None:
        """Test negative delay is rejected."""
        config = DevOpsConfig(organization="org", project="p", token="t", delay=-1)

        with pytest.raises(ValueError, match="Delay must be a non-negative number"):
            config.validate()

    @pytest.mark.parametrize("delay", [float("nan"), float("inf")])
    @patch.dict(os.environ, {}, clear=True)
    def test_validate_rejects_non_finite_delay(self, delay: float) -> None:
        """Test NaN and infinite delays are rejected."""
        config = DevOpsConfig(organization="org", project="p", token="t", delay=delay)

        with pytest.raises(ValueError, match="Delay must be a non-negative number"):
            config.validate()

    @patch.dict(os.environ, {}, clear=True)
    def test_zero_delay_is_kept(self) -> None:
        """Test an explicit zero delay does not fall back to the default."""
        config = DevOpsConfig(organization="org", project="p", token="t", delay=0)

        assert config.delay == 0
        config.validate()
