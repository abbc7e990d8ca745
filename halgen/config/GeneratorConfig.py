"""Top-level halgen configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..metadata._METADATA_TYPES import METADATA_TYPES
from ..strategy._STRATEGIES import STRATEGIES
from .LogConfig import LogConfig

CONFIG_ENV_VAR = "HALGEN_CONFIG"


class GeneratorConfig(BaseModel):
    """Configuration applied by ResourceGenerator.from_config."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    strategies: dict[str, str] = Field(
        default_factory=dict,
        description="Metadata type name -> strategy name overrides",
    )

    @field_validator("strategies")
    @classmethod
    def validate_strategies(cls, value: dict[str, str]) -> dict[str, str]:
        for metadata_name, strategy_name in value.items():
            if metadata_name not in METADATA_TYPES:
                raise ValueError(
                    f"Unknown metadata type: {metadata_name!r} (supported: {list(METADATA_TYPES.keys())})"
                )
            if strategy_name not in STRATEGIES:
                raise ValueError(f"Unknown strategy: {strategy_name!r} (supported: {list(STRATEGIES.keys())})")
        return value

    @classmethod
    def load(cls, path: Path | None = None) -> "GeneratorConfig":
        """Load and validate config from a JSON file.

        Uses ``path`` when given, else the file named by $HALGEN_CONFIG. With
        neither, returns the defaults.

        Raises:
            ValueError: If the file is missing, is not valid JSON, or fails validation
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if not env_path:
                return cls()
            path = Path(env_path).expanduser()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
