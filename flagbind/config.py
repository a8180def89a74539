# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Load parameter schemas for `Args` from YAML or TOML files.

Example (YAML):
    program: foo
    remainder: output path
    remainder_field: outfile
    parameters:
      - key: i
        name: input
        type: str
        help: Specify the input file
        default: ./in.foo
      - key: r
        name: rate
        type: float
        default: 0.75
      - key: d
        name: debug
        type: bool
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from flagbind.exceptions import ConfigError, RegistrationError
from flagbind.logger import logger
from flagbind.parser.args import Args
from flagbind.parser.codecs import TYPE_NAMES
from flagbind.parser.parameter import MISSING
from flagbind.parser.registry import validate_key, validate_name


class ParameterConfig(BaseModel):
    """One parameter definition in a schema file."""

    key: str
    name: str
    field: str | None = None
    type: str = "str"
    help: str = ""
    default: Any = None

    @field_validator("key")
    @classmethod
    def check_key(cls, value: str) -> str:
        try:
            validate_key(value)
        except RegistrationError as error:
            raise ValueError(str(error)) from error
        return value

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        try:
            validate_name(value)
        except RegistrationError as error:
            raise ValueError(str(error)) from error
        return value

    @field_validator("type")
    @classmethod
    def check_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in TYPE_NAMES:
            valid = ", ".join(TYPE_NAMES)
            raise ValueError(f"Invalid type '{value}'. Must be one of: {valid}")
        return normalized

    @property
    def target_field(self) -> str:
        return self.field or self.name.replace("-", "_")

    def resolved_default(self) -> Any:
        if "default" in self.model_fields_set:
            return self.default
        return MISSING


class ArgsConfig(BaseModel):
    """Schema file model: program name, remainder label and parameters."""

    program: str | None = None
    remainder: str | None = None
    remainder_field: str | None = None
    parameters: list[ParameterConfig] = Field(default_factory=list)

    def to_args(self, target: Any, argv: Sequence[str] | None = None) -> Args:
        """
        Build an `Args` with every parameter bound to `target`.

        Args:
            target (Any): Object or mutable mapping receiving parsed values.
            argv (Sequence[str] | None): Argument vector for the new `Args`.

        Raises:
            RegistrationError: If the schema registers conflicting parameters.
        """
        args = Args(argv, program=self.program)
        for parameter in self.parameters:
            args.arg(
                target,
                parameter.target_field,
                parameter.key,
                parameter.name,
                parameter.help,
                parameter.resolved_default(),
                type=parameter.type,
            )
        if self.remainder:
            if self.remainder_field:
                args.remainder(self.remainder, target, self.remainder_field)
            else:
                args.remainder(self.remainder)
        return args


def loader(file_path: Path | str) -> ArgsConfig:
    """
    Load a parameter schema from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        ArgsConfig: The validated schema.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(raw_config).__name__}"
        )

    try:
        config = ArgsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid config in {path}:\n{error}") from error

    logger.debug("Loaded %d parameter(s) from %s", len(config.parameters), path)
    return config
