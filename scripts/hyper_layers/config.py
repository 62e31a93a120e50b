"""Configuration models, loaders and layer-file ingestion."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .commands import (
    app,
    app_with_notification,
    basic_remap,
    fallbacks,
    open_command,
    rectangle,
    shell,
    shortcut,
    standard_hyperkey,
    switch_karabiner_profile,
)
from .exceptions import ConfigError
from .keycodes import HYPER_MODIFIERS, validate_key_code
from .models import DirectBinding, LayerCommand, Sublayer

logger = logging.getLogger(__name__)

DEFAULT_MASTER_VARIABLE = "hyper"
DEFAULT_VARIABLE_PREFIX = "hyper_sublayer_"

# Keys that mark a mapping as a single command rather than a sublayer
COMMAND_MARKERS = (
    "to",
    "app",
    "open",
    "shell",
    "shortcut",
    "rectangle",
    "remap",
    "hyper",
    "profile",
)

# Extra keys each command shorthand understands, besides "description"
COMMAND_OPTIONS: dict[str, tuple[str, ...]] = {
    "app": ("notify",),
    "shortcut": ("modifiers",),
    "remap": ("modifiers",),
    "profile": ("message",),
}


class CompilerConfig(BaseModel):
    """Names and modifiers used when emitting manipulators."""

    master_variable: str = Field(
        DEFAULT_MASTER_VARIABLE, min_length=1, description="Variable set while Hyper is held"
    )
    variable_prefix: str = Field(
        DEFAULT_VARIABLE_PREFIX, min_length=1, description="Prefix of sublayer variables"
    )
    tap_alone_modifiers: list[str] = Field(
        default_factory=lambda: list(HYPER_MODIFIERS),
        description="Modifiers sent when a sublayer key is tapped alone",
    )


class LayersFile(BaseModel):
    """Top-level authoring file (YAML)."""

    title: str = Field("Hyper Key sublayers", description="Complex modifications title")
    hyper_key: str | None = Field(None, description="Physical key that sets the master variable")
    hyper_key_alone: str | None = Field("escape", description="Key sent when hyper_key is tapped")
    fallbacks: bool = Field(False, description="Pass unbound keys through as Hyper chords")
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    layers: dict[str, Any] = Field(default_factory=dict)

    @field_validator("hyper_key", "hyper_key_alone")
    @classmethod
    def _known_key(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return validate_key_code(value, "hyper key")

    @field_validator("compiler", "layers", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        # An empty YAML section loads as None
        return {} if value is None else value

    @field_validator("layers", mode="before")
    @classmethod
    def _string_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    def binding_map(self) -> dict[str, DirectBinding | Sublayer | None]:
        """Classify the raw layers into binding entries."""
        return parse_layers(self.layers, include_fallbacks=self.fallbacks)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_layers_file(path: Path) -> LayersFile:
    """Load a layers definition from a YAML file."""
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return LayersFile.model_validate(data)


def _string_list(value: Any, location: str) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ConfigError(f"{location}: expected a string or list of strings")


def _build_command(marker: str, raw: dict[str, Any], location: str) -> LayerCommand:
    value = raw[marker]

    if marker == "to":
        return LayerCommand.model_validate({"to": value})
    if marker == "app":
        if raw.get("notify"):
            return app_with_notification(str(value))
        return app(str(value))
    if marker == "open":
        return open_command(*_string_list(value, location))
    if marker == "shell":
        return shell("\n".join(_string_list(value, location)))
    if marker == "shortcut":
        return shortcut(str(value), _string_list(raw.get("modifiers", []), location))
    if marker == "rectangle":
        return rectangle(str(value))
    if marker == "remap":
        modifiers = raw.get("modifiers")
        return basic_remap(
            validate_key_code(str(value), location),
            _string_list(modifiers, location) if modifiers is not None else None,
        )
    if marker == "hyper":
        return standard_hyperkey(validate_key_code(str(value), location))
    if marker == "profile":
        return switch_karabiner_profile(str(value), raw.get("message"))
    raise ConfigError(f"{location}: unsupported command '{marker}'")


def parse_command(raw: Any, location: str = "command") -> LayerCommand:
    """Turn one command mapping into a LayerCommand.

    Accepts either a raw ``{to: [...], description: ...}`` mapping or one of
    the shorthands named in COMMAND_MARKERS, e.g. ``{app: Mail}``.

    Args:
        raw: Mapping loaded from YAML
        location: Human-readable position used in error messages

    Returns:
        Parsed LayerCommand
    """
    if isinstance(raw, LayerCommand):
        return raw
    if not isinstance(raw, dict):
        raise ConfigError(f"{location}: expected a command mapping, got {type(raw).__name__}")

    markers = [m for m in COMMAND_MARKERS if m in raw]
    if not markers:
        raise ConfigError(
            f"{location}: command needs one of {', '.join(COMMAND_MARKERS)}"
        )
    if len(markers) > 1:
        raise ConfigError(f"{location}: conflicting commands {markers}")

    allowed = {markers[0], "description", *COMMAND_OPTIONS.get(markers[0], ())}
    unknown = [str(k) for k in raw if k not in allowed]
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", location, ", ".join(unknown))

    command = _build_command(markers[0], raw, location)
    if "description" in raw:
        command = command.model_copy(update={"description": raw["description"]})
    return command


def is_command_mapping(raw: Any) -> bool:
    """True if raw is a mapping that describes a single command."""
    return isinstance(raw, dict) and any(m in raw for m in COMMAND_MARKERS)


def parse_entry(key_code: str, raw: Any) -> DirectBinding | Sublayer | None:
    """Classify one top-level value as a direct binding or a sublayer.

    Undefined and primitive values yield None and take no part in compilation.
    An empty mapping is a direct binding with no actions.
    """
    if raw is None:
        return None
    if isinstance(raw, (DirectBinding, Sublayer)):
        return raw
    if isinstance(raw, LayerCommand):
        return DirectBinding(command=raw)
    if not isinstance(raw, dict):
        logger.warning(
            "Skipping '%s': expected a command or sublayer mapping, got %s",
            key_code,
            type(raw).__name__,
        )
        return None
    if not raw:
        return DirectBinding()
    if is_command_mapping(raw):
        return DirectBinding(command=parse_command(raw, f"key '{key_code}'"))

    commands = {
        str(command_key): parse_command(value, f"sublayer '{key_code}' command '{command_key}'")
        for command_key, value in raw.items()
        if value is not None
    }
    return Sublayer(commands=commands)


def parse_layers(
    raw: dict[str, Any] | None,
    include_fallbacks: bool = False,
) -> dict[str, DirectBinding | Sublayer | None]:
    """Classify every top-level entry of a layers mapping.

    Args:
        raw: Key -> command/sublayer mapping as loaded from YAML
        include_fallbacks: Start from the Hyper-chord fallbacks; entries in
            raw override them in place

    Returns:
        Ordered top-level map of binding entries
    """
    layers: dict[str, DirectBinding | Sublayer | None] = {}
    if include_fallbacks:
        layers.update({k: DirectBinding(command=c) for k, c in fallbacks().items()})

    for key_code, value in (raw or {}).items():
        layers[str(key_code)] = parse_entry(str(key_code), value)
    return layers
