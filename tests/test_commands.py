"""Tests for command builder helpers."""

from hyper_layers.commands import (
    KARABINER_CLI,
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
from hyper_layers.keycodes import FALLBACK_KEYS, HYPER_MODIFIERS


def shells(command):
    return [t.shell_command for t in command.to]


def test_open_command_multiple_targets():
    command = open_command("https://a.example", "https://b.example")
    assert shells(command) == ["open https://a.example", "open https://b.example"]
    assert command.description == "Open https://a.example & https://b.example"


def test_app():
    assert shells(app("Google Chrome")) == ["open -a 'Google Chrome.app'"]


def test_app_with_notification():
    command = app_with_notification("Mail")
    assert command.description == "Open Mail"
    script = shells(command)[0]
    assert "grep '[M]ail$'" in script
    assert script.endswith("&& open -a 'Mail'")


def test_raycast_notification_encodes_arguments():
    assert raycast_notification_command("Hi") == (
        "open -g 'raycast://extensions/maxnyby/raycast-notification/index"
        "?launchType=background&arguments="
        "%7B%22title%22%3A%22Hi%22%2C%22type%22%3A%22success%22%7D'"
    )


def test_shell_skips_blank_lines():
    command = shell("""
        cd ~/src
        git pull
    """)
    assert shells(command) == ["cd ~/src", "git pull"]
    assert command.description == "cd ~/src && git pull"


def test_shell_command_trims():
    command = shell_command(["  echo hi  "])
    assert shells(command) == ["echo hi"]


def test_shortcut_keystroke_with_modifiers():
    command = shortcut("t", ["shift", "cmd"])
    assert shells(command) == [
        "osascript -e 'tell application \"System Events\" to "
        "keystroke \"t\" using {command down, shift down}'"
    ]


def test_shortcut_function_key_uses_key_code():
    script = shells(shortcut("f5", ["ctrl"]))[0]
    assert "key code 96 using {control down}" in script
    assert "keystroke" not in script


def test_shortcut_without_modifiers():
    script = shells(shortcut("a"))[0]
    assert script.endswith('keystroke "a"\'')


def test_rectangle():
    command = rectangle("left-half")
    assert shells(command) == ["open -g rectangle://execute-action?name=left-half"]
    assert command.description == "Window: left-half"


def test_switch_karabiner_profile():
    script = shells(switch_karabiner_profile("Gaming"))[0]
    assert script.startswith(f"'{KARABINER_CLI}' --select-profile 'Gaming' && ")
    assert "Switched%20karabiner%20profile%3A%20Gaming" in script


def test_basic_remap():
    assert basic_remap("escape").to[0].modifiers is None
    assert basic_remap("h", ["left_command"]).to[0].modifiers == ["left_command"]


def test_standard_hyperkey():
    event = standard_hyperkey("k").to[0]
    assert event.key_code == "k"
    assert event.modifiers == list(HYPER_MODIFIERS)


def test_fallbacks_cover_vocabulary():
    bindings = fallbacks()
    assert list(bindings) == list(FALLBACK_KEYS)
    assert bindings["slash"].to[0].key_code == "slash"
