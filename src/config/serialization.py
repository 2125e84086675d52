"""JSON serialization and deserialization for generator configs."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dacite import Config as DaciteConfig, from_dict

from src.config.generation import GeneratorConfig


def _widen_int(value: Any) -> Any:
    """Accept a JSON integer such as 1 for a float field; bools stay as is."""
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    type_hooks={float: _widen_int},
    check_types=True,
    strict=True,
)


def config_to_json(config: GeneratorConfig) -> str:
    """Serialize a GeneratorConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GeneratorConfig:
    """Deserialize a JSON string to a GeneratorConfig.

    Uses dacite with strict=True to reject unknown keys, cast=[tuple] to
    turn the JSON weights array back into a tuple, and a float type hook
    so an integral "p" such as 1 loads as 1.0. Strings and booleans for
    "p" still fail the type check.
    """
    return config_from_dict(json.loads(json_str))


def config_from_dict(d: dict[str, Any]) -> GeneratorConfig:
    """Reconstruct a GeneratorConfig from a plain dictionary."""
    return from_dict(data_class=GeneratorConfig, data=d, config=_DACITE_CONFIG)


def load_config(path: Path) -> GeneratorConfig:
    """Read a GeneratorConfig from a JSON file."""
    return config_from_json(Path(path).read_text())
