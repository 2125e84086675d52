"""Generator configuration: frozen dataclass plus JSON serialization."""

from src.config.generation import GeneratorConfig, model_for
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_json,
    load_config,
)

__all__ = [
    "GeneratorConfig",
    "config_from_dict",
    "config_from_json",
    "config_to_json",
    "load_config",
    "model_for",
]
