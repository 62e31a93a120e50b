"""Compile Hyper key layers into Karabiner rules.

Compilation runs in two phases:
1. Build the registry of every sublayer variable (each guard must see all of them)
2. Compile each top-level entry independently, in declaration order

A sublayer key toggles its own variable; its commands only check that variable.
Toggles and direct bindings refuse to fire while any other sublayer is engaged.
"""

import logging

from .config import CompilerConfig, parse_entry
from .keycodes import validate_key_code
from .models import (
    LayerCommand,
    Manipulator,
    Rule,
    Sublayer,
    ToEvent,
    TopLevelMap,
    any_modifiers,
    set_variable,
    variable_if,
)
from .registry import SublayerRegistry, build_registry

logger = logging.getLogger(__name__)


def create_hyper_sublayer(
    sublayer_key: str,
    commands: dict[str, LayerCommand],
    registry: SublayerRegistry,
    config: CompilerConfig,
) -> list[Manipulator]:
    """Create the manipulators for one sublayer.

    The first manipulator toggles the sublayer variable while the key is held;
    tapped alone, the key sends itself with the Hyper modifiers. Then one
    manipulator per command, gated on the sublayer variable only.

    Args:
        sublayer_key: Key that engages the sublayer
        commands: Command key -> action, in emission order
        registry: Variables of every sublayer in the map
        config: Compiler settings

    Returns:
        Toggle manipulator followed by the command manipulators
    """
    variable = registry.variable_for(sublayer_key)

    toggle = Manipulator(
        description=f"Toggle Hyper sublayer {sublayer_key}",
        from_=any_modifiers(sublayer_key),
        to_if_alone=[
            ToEvent(key_code=sublayer_key, modifiers=list(config.tap_alone_modifiers))
        ],
        # Variables default to 0, so clearing on release keeps "== 0" guards valid
        to_after_key_up=[set_variable(variable, 0)],
        to=[set_variable(variable, 1)],
        # Only engage when no other sublayer is active
        conditions=[
            variable_if(registry.master_variable, 1),
            *(variable_if(other, 0) for other in registry.others(variable)),
        ],
    )

    manipulators = [toggle]
    for command_key, command in commands.items():
        manipulators.append(
            Manipulator(
                description=command.description,
                from_=any_modifiers(command_key),
                to=list(command.to),
                conditions=[variable_if(variable, 1)],
            )
        )
    return manipulators


def _direct_manipulator(
    key_code: str,
    command: LayerCommand,
    registry: SublayerRegistry,
) -> Manipulator:
    return Manipulator(
        description=command.description,
        from_=any_modifiers(key_code),
        to=list(command.to),
        conditions=[
            variable_if(registry.master_variable, 1),
            *(variable_if(v, 0) for v in registry.variables),
        ],
    )


def _validate_keys(layers: TopLevelMap) -> None:
    for key_code, entry in layers.items():
        validate_key_code(key_code, "top-level key")
        if isinstance(entry, Sublayer):
            for command_key in entry.commands:
                validate_key_code(command_key, f"sublayer '{key_code}' command '{command_key}'")


def create_hyper_sublayers(
    layers: TopLevelMap,
    config: CompilerConfig | None = None,
) -> list[Rule]:
    """Compile a full top-level map into one rule per defined entry.

    Undefined (None) entries produce no rule. A sublayer without commands is
    compiled like a direct binding with no actions.

    Args:
        layers: Top-level key -> binding entry map
        config: Compiler settings (defaults used when omitted)

    Returns:
        Rules in declaration order
    """
    config = config or CompilerConfig()
    # Plain dicts, LayerCommands and primitives are classified like YAML input
    layers = {key_code: parse_entry(key_code, entry) for key_code, entry in layers.items()}
    _validate_keys(layers)
    registry = build_registry(layers, config)

    rules = []
    for key_code, entry in layers.items():
        if entry is None:
            continue

        if isinstance(entry, Sublayer) and not entry.is_empty:
            rules.append(
                Rule(
                    description=f'Hyper Key sublayer "{key_code}"',
                    manipulators=create_hyper_sublayer(
                        key_code, entry.commands, registry, config
                    ),
                )
            )
            continue

        if isinstance(entry, Sublayer):
            # no commands: compiled as a direct binding with no actions
            command = LayerCommand()
        else:
            command = entry.command
        rules.append(
            Rule(
                description=f"Hyper Key + {key_code}",
                manipulators=[_direct_manipulator(key_code, command, registry)],
            )
        )

    logger.debug("Compiled %d rules from %d entries", len(rules), len(layers))
    return rules
