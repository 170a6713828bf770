"""Configuration loader and validator for the documentation generator.

Loads settings from configs/config.yaml, applies environment variable
overrides for credentials and run options, and provides typed access
to all configuration sections via dataclasses.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"

DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"

DEFAULT_EXTENSIONS = [
    ".js",
    ".ts",
    ".py",
    ".java",
    ".go",
    ".rs",
    ".ps1",
    ".psm1",
    ".sh",
    ".bash",
    ".cpp",
    ".c",
    ".cs",
    ".rb",
    ".php",
    ".kt",
    ".swift",
    ".yml",
    ".yaml",
]

DEFAULT_EXCLUDE_PATTERNS = [
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/vendor/**",
    "**/.git/**",
    "**/*.test.*",
    "**/*.spec.*",
    "**/Documentation/**",
]


@dataclass
class APIConfig:
    """Configuration for the chat-completion API client."""

    provider: str = "azure_openai"
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    deployment: str = "gpt-4"
    api_version: str = "2024-12-01-preview"
    max_completion_tokens: int = 16000
    request_delay: float = 1.0


@dataclass
class DiscoveryConfig:
    """Configuration for source file discovery."""

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_patterns: list[str] = field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS)
    )


@dataclass
class LimitsConfig:
    """Size ceilings applied to each source file, in characters."""

    min_chars: int = 10
    max_chars: int = 200000
    truncate_chars: int = 100000


@dataclass
class OutputConfig:
    """Configuration for documentation output."""

    docs_dir: str = "Documentation"
    summary_file: str = "SUMMARY.md"


@dataclass
class GenerationConfig:
    """Options controlling which files are documented and how."""

    doc_type: str = "all"
    force_all: bool = False
    base_ref: str = "HEAD~1"
    head_ref: str = "HEAD"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class SyncConfig:
    """Remotes and branch used by the repository sync helper."""

    upstream_remote: str = "upstream"
    origin_remote: str = "origin"
    branch: str = "main"


@dataclass
class AppConfig:
    """Top-level application configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean flag from the environment.

    Only the literal string ``true`` enables the flag.

    Args:
        name: Environment variable name.

    Returns:
        True or False when the variable is set, None otherwise.
    """
    value = os.getenv(name)
    if value is None:
        return None
    return value == "true"


def _build_api_config(data: dict) -> APIConfig:
    """Build an APIConfig from a dictionary plus environment overrides.

    Credentials are never read from the config file. The endpoint and
    deployment may be set in the file and are overridden by the
    environment when present.

    Args:
        data: Dictionary with API settings.

    Returns:
        A configured APIConfig instance.
    """
    provider = data.get("provider", "azure_openai")
    if provider == "anthropic":
        api_key = os.getenv("ANTHROPIC_API_KEY")
        key_name = "ANTHROPIC_API_KEY"
        # Azure deployment names never apply to the Anthropic API
        deployment = data.get("deployment", DEFAULT_ANTHROPIC_MODEL)
    else:
        api_key = os.getenv("AZURE_OPENAI_API_KEY")
        key_name = "AZURE_OPENAI_API_KEY"
        deployment = os.getenv("AZURE_OPENAI_DEPLOYMENT") or data.get(
            "deployment", "gpt-4"
        )
    if not api_key:
        logger.warning("%s not set in environment", key_name)

    return APIConfig(
        provider=provider,
        endpoint=os.getenv("AZURE_OPENAI_ENDPOINT") or data.get("endpoint"),
        api_key=api_key,
        deployment=deployment,
        api_version=data.get("api_version", "2024-12-01-preview"),
        max_completion_tokens=data.get("max_completion_tokens", 16000),
        request_delay=data.get("request_delay", 1.0),
    )


def _build_generation_config(data: dict) -> GenerationConfig:
    """Build a GenerationConfig from a dictionary plus environment overrides.

    Args:
        data: Dictionary with generation settings.

    Returns:
        A configured GenerationConfig instance.
    """
    force_all = _env_flag("FORCE_ALL")
    return GenerationConfig(
        doc_type=os.getenv("DOC_TYPE") or data.get("doc_type", "all"),
        force_all=force_all if force_all is not None else data.get("force_all", False),
        base_ref=data.get("base_ref", "HEAD~1"),
        head_ref=data.get("head_ref", "HEAD"),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values. Credentials
    and per-run options (DOC_TYPE, FORCE_ALL) come from the environment.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file not found at %s, using defaults", path)
        raw = {}

    discovery_data = raw.get("discovery", {})
    discovery_config = DiscoveryConfig(
        extensions=discovery_data.get("extensions", list(DEFAULT_EXTENSIONS)),
        exclude_patterns=discovery_data.get(
            "exclude_patterns", list(DEFAULT_EXCLUDE_PATTERNS)
        ),
    )

    limits_data = raw.get("limits", {})
    limits_config = LimitsConfig(
        min_chars=limits_data.get("min_chars", 10),
        max_chars=limits_data.get("max_chars", 200000),
        truncate_chars=limits_data.get("truncate_chars", 100000),
    )

    output_data = raw.get("output", {})
    output_config = OutputConfig(
        docs_dir=output_data.get("docs_dir", "Documentation"),
        summary_file=output_data.get("summary_file", "SUMMARY.md"),
    )

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file=logging_data.get("file"),
    )

    sync_data = raw.get("sync", {})
    sync_config = SyncConfig(
        upstream_remote=sync_data.get("upstream_remote", "upstream"),
        origin_remote=sync_data.get("origin_remote", "origin"),
        branch=sync_data.get("branch", "main"),
    )

    return AppConfig(
        api=_build_api_config(raw.get("api", {})),
        discovery=discovery_config,
        limits=limits_config,
        output=output_config,
        generation=_build_generation_config(raw.get("generation", {})),
        logging=logging_config,
        sync=sync_config,
    )
