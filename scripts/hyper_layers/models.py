"""Models for commands, binding entries and compiled Karabiner rules."""

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .keycodes import validate_key_code


class SetVariable(BaseModel):
    """Karabiner ``set_variable`` payload."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Variable name")
    value: int = Field(..., description="Value assigned to the variable")


class ToEvent(BaseModel):
    """A single low-level output event.

    Only the fields the compiler needs are modelled; any other Karabiner
    to-event field is kept as-is and passed through on dump.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    key_code: str | None = Field(None, description="Key to send")
    modifiers: list[str] | None = Field(None, description="Modifiers held while sending key_code")
    shell_command: str | None = Field(None, description="Shell command to run")
    set_variable: SetVariable | None = Field(None, description="Variable to assign")

    @field_validator("key_code")
    @classmethod
    def _known_key_code(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return validate_key_code(value, "to event")


class LayerCommand(BaseModel):
    """A terminal action: ordered output events plus an optional description."""

    model_config = ConfigDict(frozen=True)

    to: list[ToEvent] = Field(default_factory=list)
    description: str | None = None


class FromModifiers(BaseModel):
    """Modifier policy for a trigger key."""

    optional: list[str] = Field(default_factory=lambda: ["any"])


class FromEvent(BaseModel):
    """Trigger key of a manipulator."""

    key_code: str
    modifiers: FromModifiers = Field(default_factory=FromModifiers)


class Condition(BaseModel):
    """Guard on a named variable; all conditions of a manipulator must hold."""

    type: Literal["variable_if"] = "variable_if"
    name: str
    value: int


class Manipulator(BaseModel):
    """One Karabiner ``basic`` manipulator."""

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    type: Literal["basic"] = "basic"
    from_: FromEvent = Field(..., alias="from")
    to: list[ToEvent] | None = None
    to_if_alone: list[ToEvent] | None = None
    to_after_key_up: list[ToEvent] | None = None
    conditions: list[Condition] | None = None


class Rule(BaseModel):
    """Compiled output unit: a description and its manipulators."""

    description: str
    manipulators: list[Manipulator]

    def to_dict(self) -> dict[str, Any]:
        """Return the record consumed by Karabiner-Elements."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DirectBinding(BaseModel):
    """Top-level key that runs a command straight from the Hyper state."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["direct"] = "direct"
    command: LayerCommand = Field(default_factory=LayerCommand)


class Sublayer(BaseModel):
    """Top-level key that, while held, exposes its own command keys."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sublayer"] = "sublayer"
    commands: dict[str, LayerCommand] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.commands


BindingEntry = Annotated[Union[DirectBinding, Sublayer], Field(discriminator="kind")]

# None marks an undefined (placeholder) entry
TopLevelMap = Mapping[str, Optional[BindingEntry]]


def any_modifiers(key_code: str) -> FromEvent:
    """Trigger on key_code regardless of which modifiers are held."""
    return FromEvent(key_code=key_code)


def set_variable(name: str, value: int) -> ToEvent:
    return ToEvent(set_variable=SetVariable(name=name, value=value))


def variable_if(name: str, value: int) -> Condition:
    return Condition(name=name, value=value)
