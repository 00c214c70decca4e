"""
Configuration loading.

Sources, later ones winning key by key within a section:
1. Packaged defaults: greeting_mcp/config/defaults/settings.yaml
2. User config: config.yaml in --config-dir (default ~/.greeting-mcp/)
3. Environment: GREETING_MCP_<SECTION>__<KEY>, e.g.
   GREETING_MCP_TIME__DEFAULT_TIMEZONE=UTC
"""

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from greeting_mcp.config.models import GreetingServerConfig


DEFAULT_CONFIG_DIR = Path.home() / ".greeting-mcp"
PACKAGE_DEFAULTS_FILE = Path(__file__).parent / "defaults" / "settings.yaml"

ENV_PREFIX = "GREETING_MCP_"
ENV_DELIMITER = "__"

# server, time, image
SECTIONS = tuple(GreetingServerConfig.model_fields)


def _merge_sections(base: dict, override: dict) -> dict:
    """Overlay one section mapping on another without modifying either."""
    merged = {
        section: dict(values) if isinstance(values, dict) else values
        for section, values in base.items()
    }
    for section, values in override.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def _read_sections(path: Path) -> dict[str, Any]:
    """
    Read a YAML config file.

    A missing or empty file reads as no settings.

    Raises:
        ValueError: If the file is not YAML or not a mapping of sections
    """
    if not path.is_file():
        return {}
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{path} is not valid YAML: {e}") from e
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"{path} must map section names to settings")
    return content


def _env_value(raw: str) -> Any:
    """Read an environment value as a YAML scalar ("8" -> 8, "no" -> False)."""
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if value is None or isinstance(value, (dict, list)):
        return raw
    return value


def _env_sections(environ: Optional[Mapping[str, str]] = None) -> dict[str, dict[str, Any]]:
    """Collect GREETING_MCP_<SECTION>__<KEY> variables for known sections."""
    environ = os.environ if environ is None else environ
    sections: dict[str, dict[str, Any]] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX):].lower().partition(ENV_DELIMITER)
        if section in SECTIONS and key:
            sections.setdefault(section, {})[key] = _env_value(raw)
    return sections


def load_config(config_dir: Optional[str | Path] = None) -> GreetingServerConfig:
    """
    Load configuration from the packaged defaults, user file and environment.

    Args:
        config_dir: Directory holding config.yaml (default ~/.greeting-mcp/)

    Raises:
        ValueError: If the user config file cannot be read
        pydantic.ValidationError: If a setting is invalid
    """
    user_file = (Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR) / "config.yaml"

    settings = _read_sections(PACKAGE_DEFAULTS_FILE)
    settings = _merge_sections(settings, _read_sections(user_file))
    settings = _merge_sections(settings, _env_sections())

    return GreetingServerConfig.model_validate(settings)
