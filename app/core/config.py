"""
Configuration for the resume parser.

Values come from an optional YAML file and are then overridden by environment
variables. The result is cached; call ``get_config.cache_clear()`` after
changing the environment (tests do this).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field


CONFIG_PATH_ENV = "RESUME_PARSER_CONFIG"


class ParserConfig(BaseModel):
    """Parser configuration."""
    log_level: str = Field(default="INFO")
    line_y_tolerance: float = Field(default=2.0, ge=0.0, description="Max baseline distance for fragments on the same line")
    max_fulltext_skills: int = Field(default=15, ge=1)
    default_name: str = Field(default="Unknown Candidate")
    default_job_title: str = Field(default="Software Developer")
    education_scan_stops_at_sections: bool = Field(
        default=False,
        description="Stop the full-text education scan at the next sibling section header",
    )


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def _load_yaml_config() -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = Path(os.environ.get(CONFIG_PATH_ENV, get_project_root() / "config.yaml"))

    if config_path.exists():
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    return {}


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    if "RESUME_PARSER_LOG_LEVEL" in os.environ:
        config_dict["log_level"] = os.environ["RESUME_PARSER_LOG_LEVEL"]

    if "RESUME_PARSER_LINE_Y_TOLERANCE" in os.environ:
        config_dict["line_y_tolerance"] = float(os.environ["RESUME_PARSER_LINE_Y_TOLERANCE"])

    if "RESUME_PARSER_MAX_SKILLS" in os.environ:
        config_dict["max_fulltext_skills"] = int(os.environ["RESUME_PARSER_MAX_SKILLS"])

    return config_dict


@lru_cache()
def get_config() -> ParserConfig:
    """
    Get parser configuration with caching.

    Loads from YAML file and applies environment variable overrides.

    Returns:
        ParserConfig: The parser configuration.
    """
    raw_config = _load_yaml_config()
    raw_config = _apply_env_overrides(raw_config)

    return ParserConfig(**raw_config)
