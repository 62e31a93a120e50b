"""Package compiled rules as a Karabiner complex-modifications document."""

from typing import Any

from .compiler import create_hyper_sublayers
from .config import CompilerConfig, LayersFile
from .models import Manipulator, Rule, ToEvent, any_modifiers, set_variable


def hyper_key_rule(
    from_key: str,
    config: CompilerConfig,
    alone_key: str | None = "escape",
) -> Rule:
    """Rule that holds the master variable at 1 while from_key is down.

    Args:
        from_key: Physical key acting as Hyper (e.g. caps_lock)
        config: Compiler settings (master variable name)
        alone_key: Key sent when from_key is tapped alone, or None

    Returns:
        Rule with a single manipulator
    """
    return Rule(
        description=f"Hyper Key ({from_key})",
        manipulators=[
            Manipulator(
                description=f"{from_key} -> Hyper Key",
                from_=any_modifiers(from_key),
                to=[set_variable(config.master_variable, 1)],
                to_after_key_up=[set_variable(config.master_variable, 0)],
                to_if_alone=[ToEvent(key_code=alone_key)] if alone_key else None,
            )
        ],
    )


def build_rules(layers_file: LayersFile) -> list[Rule]:
    """Compile a layers file, prepending the Hyper key rule when configured."""
    rules = []
    if layers_file.hyper_key:
        rules.append(
            hyper_key_rule(
                layers_file.hyper_key, layers_file.compiler, layers_file.hyper_key_alone
            )
        )
    rules.extend(create_hyper_sublayers(layers_file.binding_map(), layers_file.compiler))
    return rules


def build_document(layers_file: LayersFile) -> dict[str, Any]:
    """Return the complex-modifications record ({title, rules})."""
    return {
        "title": layers_file.title,
        "rules": [rule.to_dict() for rule in build_rules(layers_file)],
    }
