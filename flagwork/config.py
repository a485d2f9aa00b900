# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative flag definitions for Flagwork, loaded from YAML or TOML.

A definitions file describes the program and its flags; `loader()` validates it
with pydantic and returns a configured `Arguments` instance. Definitions only
declare flags. They never supply flag values.

Example (YAML):
    program: convert
    version: 1.2.0
    description: Convert one file into another format.
    flags:
      - kind: switch
        name: verbose
        alias: v
        help: Print progress
      - kind: regular
        name: output
        alias: o
        default: out.txt
      - kind: positional
        name: input
        lowest: 1
        saturation: 1
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from flagwork.logger import logger
from flagwork.parser.arguments import Arguments
from flagwork.parser.flag_kind import FlagKind


class FlagConfig(BaseModel):
    """One flag declaration."""

    kind: FlagKind = FlagKind.REGULAR
    name: str
    help: str = ""
    alias: str | None = None
    default: str | None = None
    obligatory: bool = False
    append_sep: str | None = None
    lowest: int = Field(default=0, ge=0)
    saturation: int = Field(default=0, ge=0)

    @field_validator("kind", mode="before")
    @classmethod
    def coerce_kind(cls, value: Any) -> FlagKind:
        if isinstance(value, FlagKind):
            return value
        return FlagKind(value)

    @field_validator("alias", "default", "append_sep", mode="before")
    @classmethod
    def coerce_scalar(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise ValueError(f"expected a string, got {type(value).__name__}")

    @model_validator(mode="after")
    def validate_bounds(self) -> FlagConfig:
        if self.saturation and self.saturation < self.lowest:
            raise ValueError(
                f"saturation {self.saturation} is lower than lowest {self.lowest}"
            )
        return self


class ArgumentsConfig(BaseModel):
    """Flagwork definitions file model."""

    program: str | None = None
    version: str | None = None
    description: str = ""
    epilog: str = ""
    help_keyword: str | None = "help"
    help_alias: str | None = "h"
    version_keyword: str | None = "version"
    version_alias: str | None = "V"
    flags: list[FlagConfig] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def to_arguments(self) -> Arguments:
        arguments = Arguments(
            program=self.program,
            version=self.version,
            description=self.description,
            epilog=self.epilog,
            help_keyword=self.help_keyword,
            help_alias=self.help_alias,
            version_keyword=self.version_keyword,
            version_alias=self.version_alias,
        )
        for flag in self.flags:
            arguments.register(**flag.model_dump())
        return arguments


def load_raw_config(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Definitions file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "program: 'my-tool'\n"
            "flags:\n"
            "  - kind: 'switch'\n"
            "    name: 'verbose'\n"
            "    alias: 'v'"
        )
    return raw_config


def loader(file_path: Path | str) -> Arguments:
    """
    Load flag definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definitions file.

    Returns:
        Arguments: A parser with every declared flag registered.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If a flag entry is malformed.
        ConfigurationError: If the flags conflict (duplicate names or aliases, ...).
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such definitions file: {file_path}")

    raw_config = load_raw_config(path)
    config = ArgumentsConfig.model_validate(raw_config)
    logger.debug("Loaded %d flag definition(s) from %s", len(config.flags), path)
    return config.to_arguments()
