"""Shortcut builders that produce LayerCommand actions.

These are the building blocks used in layer definitions, e.g.::

    {"o": {"g": app("Google Chrome"), "m": app("Mail")}}
"""

import json
from urllib.parse import quote

from .keycodes import FALLBACK_KEYS, HYPER_MODIFIERS
from .models import LayerCommand, ToEvent

KARABINER_CLI = "/Library/Application Support/org.pqrs/Karabiner-Elements/bin/karabiner_cli"

# AppleScript key codes for keys System Events cannot send with `keystroke`
APPLESCRIPT_KEY_CODES: dict[str, int] = {
    "f1": 122,
    "f2": 120,
    "f3": 99,
    "f4": 118,
    "f5": 96,
    "f6": 97,
    "f7": 98,
    "f8": 100,
    "f9": 101,
    "f10": 109,
    "f11": 103,
    "f12": 111,
    "f13": 105,
    "f14": 107,
    "f15": 113,
    "f16": 106,
    "f17": 64,
    "f18": 79,
    "f19": 80,
    "f20": 90,
}

# (aliases, AppleScript modifier) in the order they are emitted
SHORTCUT_MODIFIERS: list[tuple[tuple[str, ...], str]] = [
    (("cmd", "command"), "command down"),
    (("control", "ctrl"), "control down"),
    (("alt", "option"), "option down"),
    (("shift",), "shift down"),
]


def shell_command(commands: list[str]) -> LayerCommand:
    """Run each command in order; the description joins them with &&."""
    return LayerCommand(
        to=[ToEvent(shell_command=command.strip()) for command in commands],
        description=" && ".join(commands),
    )


def shell(script: str) -> LayerCommand:
    """Create a LayerCommand from a multi-line script, one command per line."""
    lines = [line.strip() for line in script.splitlines() if line.strip()]
    return shell_command(lines)


def open_command(*what: str) -> LayerCommand:
    """Shortcut for the macOS ``open`` command."""
    return LayerCommand(
        to=[ToEvent(shell_command=f"open {w}") for w in what],
        description=f"Open {' & '.join(what)}",
    )


def app(name: str) -> LayerCommand:
    """Open an application by name."""
    return open_command(f"-a '{name}.app'")


def raycast_notification_command(notification_text: str) -> str:
    """Shell command showing a success toast through the Raycast notification extension."""
    arguments = json.dumps({"title": notification_text, "type": "success"}, separators=(",", ":"))
    encoded = quote(arguments, safe="-_.!~*'()")
    return (
        "open -g 'raycast://extensions/maxnyby/raycast-notification/index"
        f"?launchType=background&arguments={encoded}'"
    )


def app_with_notification(app_name: str) -> LayerCommand:
    """Open an app, showing a notification first if it is not already running."""
    # [M]ail keeps grep from matching its own process line
    grep_regex = f"[{app_name[:1]}]{app_name[1:]}$"
    check_command = f"ps axo pid,command | grep '{grep_regex}'"
    notification_command = raycast_notification_command(f"Opening {app_name}")

    return LayerCommand(
        to=[
            ToEvent(
                shell_command=f"({check_command} || {notification_command}) && open -a '{app_name}'"
            )
        ],
        description=f"Open {app_name}",
    )


def rectangle(name: str) -> LayerCommand:
    """Window management action through Rectangle's URL scheme."""
    return LayerCommand(
        to=[ToEvent(shell_command=f"open -g rectangle://execute-action?name={name}")],
        description=f"Window: {name}",
    )


def shortcut(key: str, modifiers: list[str] | None = None) -> LayerCommand:
    """Send a keystroke through System Events (osascript).

    Args:
        key: Character to type, or f1-f20 which are sent by key code
        modifiers: Any of cmd/command, ctrl/control, alt/option, shift

    Returns:
        LayerCommand running the osascript
    """
    modifiers = modifiers or []
    mods = [
        applescript
        for aliases, applescript in SHORTCUT_MODIFIERS
        if any(alias in modifiers for alias in aliases)
    ]
    modstring = f" using {{{', '.join(mods)}}}" if mods else ""

    if key in APPLESCRIPT_KEY_CODES:
        keystroke = f" key code {APPLESCRIPT_KEY_CODES[key]}"
    else:
        keystroke = f'keystroke "{key}"'

    return shell_command(
        [f"osascript -e 'tell application \"System Events\" to {keystroke}{modstring}'"]
    )


def switch_karabiner_profile(name: str, message: str | None = None) -> LayerCommand:
    """Select another Karabiner profile and confirm with a notification."""
    message = message or f"Switched karabiner profile: {name}"
    return shell_command(
        [f"'{KARABINER_CLI}' --select-profile '{name}' && {raycast_notification_command(message)}"]
    )


def basic_remap(key_code: str, modifiers: list[str] | None = None) -> LayerCommand:
    """Send another key, optionally with modifiers."""
    if modifiers is not None:
        return LayerCommand(to=[ToEvent(key_code=key_code, modifiers=list(modifiers))])
    return LayerCommand(to=[ToEvent(key_code=key_code)])


def standard_hyperkey(key_code: str) -> LayerCommand:
    """Send key_code with the full Hyper chord."""
    return basic_remap(key_code, list(HYPER_MODIFIERS))


def fallbacks() -> dict[str, LayerCommand]:
    """Direct bindings that pass every common key through as its Hyper chord."""
    return {key_code: standard_hyperkey(key_code) for key_code in FALLBACK_KEYS}
