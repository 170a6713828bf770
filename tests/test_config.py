"""Tests for configuration loading and environment overrides."""

from pathlib import Path
from unittest.mock import patch

import yaml

from src.utils.config import (
    DEFAULT_ANTHROPIC_MODEL,
    APIConfig,
    AppConfig,
    DiscoveryConfig,
    GenerationConfig,
    LimitsConfig,
    LoggingConfig,
    OutputConfig,
    SyncConfig,
    load_config,
)


class TestDefaults:
    """Tests for dataclass defaults."""

    def test_api_defaults(self) -> None:
        config = APIConfig()
        assert config.provider == "azure_openai"
        assert config.deployment == "gpt-4"
        assert config.api_version == "2024-12-01-preview"
        assert config.max_completion_tokens == 16000
        assert config.request_delay == 1.0

    def test_limits_defaults(self) -> None:
        limits = LimitsConfig()
        assert limits.min_chars == 10
        assert limits.max_chars == 200000
        assert limits.truncate_chars == 100000

    def test_discovery_defaults(self) -> None:
        discovery = DiscoveryConfig()
        assert ".py" in discovery.extensions
        assert ".psm1" in discovery.extensions
        assert "**/node_modules/**" in discovery.exclude_patterns

    def test_discovery_defaults_are_not_shared(self) -> None:
        first = DiscoveryConfig()
        first.extensions.append(".txt")
        assert ".txt" not in DiscoveryConfig().extensions

    def test_app_config_sections(self) -> None:
        config = AppConfig()
        assert isinstance(config.api, APIConfig)
        assert isinstance(config.discovery, DiscoveryConfig)
        assert isinstance(config.limits, LimitsConfig)
        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.generation, GenerationConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.sync, SyncConfig)
        assert config.output.docs_dir == "Documentation"
        assert config.output.summary_file == "SUMMARY.md"


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_default_config(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            config = load_config()
        assert config.api.provider == "azure_openai"
        assert config.generation.doc_type == "all"
        assert config.generation.force_all is False
        assert config.sync.upstream_remote == "upstream"

    def test_load_from_explicit_path(self, tmp_path: Path) -> None:
        config_data = {
            "api": {"deployment": "gpt-4o", "request_delay": 0.5},
            "limits": {"min_chars": 1},
            "output": {"docs_dir": "docs"},
            "logging": {"level": "DEBUG"},
        }
        config_file = tmp_path / "test_config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

        with patch.dict("os.environ", {}, clear=True):
            config = load_config(str(config_file))
        assert config.api.deployment == "gpt-4o"
        assert config.api.request_delay == 0.5
        assert config.limits.min_chars == 1
        assert config.limits.max_chars == 200000
        assert config.output.docs_dir == "docs"
        assert config.logging.level == "DEBUG"

    def test_load_nonexistent_returns_defaults(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "nonexistent.yaml"))
        assert isinstance(config, AppConfig)
        assert config.limits.max_chars == 200000

    def test_load_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert isinstance(config, AppConfig)


class TestEnvironmentOverrides:
    """Tests for credentials and run options read from the environment."""

    def test_azure_credentials(self, tmp_path: Path) -> None:
        env = {
            "AZURE_OPENAI_ENDPOINT": "https://example.openai.azure.com",
            "AZURE_OPENAI_API_KEY": "secret",
            "AZURE_OPENAI_DEPLOYMENT": "gpt-4o-mini",
        }
        with patch.dict("os.environ", env, clear=True):
            config = load_config(str(tmp_path / "missing.yaml"))
        assert config.api.endpoint == "https://example.openai.azure.com"
        assert config.api.api_key == "secret"
        assert config.api.deployment == "gpt-4o-mini"

    def test_api_key_never_read_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("api:\n  api_key: from-file\n")
        with patch.dict("os.environ", {}, clear=True):
            config = load_config(str(config_file))
        assert config.api.api_key is None

    def test_anthropic_key(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("api:\n  provider: anthropic\n")
        env = {"ANTHROPIC_API_KEY": "sk-ant", "AZURE_OPENAI_API_KEY": "azure"}
        with patch.dict("os.environ", env, clear=True):
            config = load_config(str(config_file))
        assert config.api.api_key == "sk-ant"

    def test_doc_type(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"DOC_TYPE": "readme"}, clear=True):
            config = load_config(str(tmp_path / "missing.yaml"))
        assert config.generation.doc_type == "readme"

    def test_force_all_true(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"FORCE_ALL": "true"}, clear=True):
            config = load_config(str(tmp_path / "missing.yaml"))
        assert config.generation.force_all is True

    def test_force_all_requires_literal_true(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("generation:\n  force_all: true\n")
        with patch.dict("os.environ", {"FORCE_ALL": "1"}, clear=True):
            config = load_config(str(config_file))
        assert config.generation.force_all is False

    def test_anthropic_uses_claude_model(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("api:\n  provider: anthropic\n")
        env = {"ANTHROPIC_API_KEY": "sk-ant", "AZURE_OPENAI_DEPLOYMENT": "gpt-4o"}
        with patch.dict("os.environ", env, clear=True):
            config = load_config(str(config_file))
        assert config.api.deployment == DEFAULT_ANTHROPIC_MODEL

    def test_anthropic_model_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "api:\n  provider: anthropic\n  deployment: claude-haiku-4-5-20251001\n"
        )
        with patch.dict("os.environ", {"ANTHROPIC_API_KEY": "sk-ant"}, clear=True):
            config = load_config(str(config_file))
        assert config.api.deployment == "claude-haiku-4-5-20251001"
