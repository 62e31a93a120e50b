"""Sublayer state variable naming and registry construction."""

import logging

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_VARIABLE_PREFIX, CompilerConfig
from .models import Sublayer, TopLevelMap

logger = logging.getLogger(__name__)


def sublayer_variable_name(key_code: str, prefix: str = DEFAULT_VARIABLE_PREFIX) -> str:
    """Derive the state variable for a sublayer key (e.g. o -> hyper_sublayer_o)."""
    return f"{prefix}{key_code}"


def collect_sublayer_variables(
    layers: TopLevelMap,
    prefix: str = DEFAULT_VARIABLE_PREFIX,
) -> tuple[str, ...]:
    """Return the variable of every genuine sublayer, in declaration order.

    Undefined entries, direct bindings and sublayers without commands are
    skipped without error.

    Args:
        layers: Top-level key -> binding entry map
        prefix: Fixed variable name prefix

    Returns:
        Ordered tuple of variable names
    """
    variables: list[str] = []
    for key_code, entry in layers.items():
        if entry is None:
            continue
        if not isinstance(entry, Sublayer):
            continue
        if entry.is_empty:
            continue
        variables.append(sublayer_variable_name(key_code, prefix))

    if len(set(variables)) != len(variables):
        raise RuntimeError(f"Sublayer variable collision in {variables}")

    return tuple(variables)


class SublayerRegistry(BaseModel):
    """Immutable set of sublayer variables shared by every compiled entry."""

    model_config = ConfigDict(frozen=True)

    master_variable: str
    prefix: str = DEFAULT_VARIABLE_PREFIX
    variables: tuple[str, ...] = ()

    def variable_for(self, key_code: str) -> str:
        return sublayer_variable_name(key_code, self.prefix)

    def others(self, variable: str) -> tuple[str, ...]:
        """All registered variables except the given one."""
        return tuple(v for v in self.variables if v != variable)


def build_registry(layers: TopLevelMap, config: CompilerConfig) -> SublayerRegistry:
    """Compute the registry for a full top-level map."""
    variables = collect_sublayer_variables(layers, config.variable_prefix)
    logger.debug("Registered %d sublayer variables: %s", len(variables), ", ".join(variables))
    return SublayerRegistry(
        master_variable=config.master_variable,
        prefix=config.variable_prefix,
        variables=variables,
    )
