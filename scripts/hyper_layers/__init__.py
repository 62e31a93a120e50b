"""
Hyper key sublayer compiler for Karabiner-Elements.

Turns a nested description of Hyper shortcuts into flat, conditional
complex-modification rules.

Usage:
    python -m hyper_layers compile -i layers.yaml -o hyper.json
    python -m hyper_layers variables -i layers.yaml
"""

from .commands import (
    app,
    app_with_notification,
    basic_remap,
    fallbacks,
    open_command,
    raycast_notification_command,
    rectangle,
    shell,
    shell_command,
    shortcut,
    standard_hyperkey,
    switch_karabiner_profile,
)
from .compiler import create_hyper_sublayer, create_hyper_sublayers
from .config import (
    CompilerConfig,
    LayersFile,
    load_layers_file,
    load_yaml,
    parse_command,
    parse_layers,
)
from .document import build_document, build_rules, hyper_key_rule
from .exceptions import ConfigError, UnknownKeyCodeError
from .models import (
    Condition,
    DirectBinding,
    LayerCommand,
    Manipulator,
    Rule,
    Sublayer,
    ToEvent,
)
from .registry import (
    SublayerRegistry,
    build_registry,
    collect_sublayer_variables,
    sublayer_variable_name,
)

__all__ = [
    # Models
    "Condition",
    "DirectBinding",
    "LayerCommand",
    "Manipulator",
    "Rule",
    "Sublayer",
    "ToEvent",
    # Errors
    "ConfigError",
    "UnknownKeyCodeError",
    # Config
    "CompilerConfig",
    "LayersFile",
    "load_layers_file",
    "load_yaml",
    "parse_command",
    "parse_layers",
    # Registry
    "SublayerRegistry",
    "build_registry",
    "collect_sublayer_variables",
    "sublayer_variable_name",
    # Compiler
    "create_hyper_sublayer",
    "create_hyper_sublayers",
    # Document
    "build_document",
    "build_rules",
    "hyper_key_rule",
    # Commands
    "app",
    "app_with_notification",
    "basic_remap",
    "fallbacks",
    "open_command",
    "raycast_notification_command",
    "rectangle",
    "shell",
    "shell_command",
    "shortcut",
    "standard_hyperkey",
    "switch_karabiner_profile",
]
