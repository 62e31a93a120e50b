"""Shared fixtures for hyper_layers tests."""

import pytest

from hyper_layers.models import DirectBinding, LayerCommand, Sublayer, ToEvent


def command(shell: str, description: str | None = None) -> LayerCommand:
    """Single shell-command action."""
    return LayerCommand(to=[ToEvent(shell_command=shell)], description=description)


@pytest.fixture
def open_chrome():
    return command("open -a 'Google Chrome.app'", "Open Chrome")


@pytest.fixture
def open_mail():
    return command("open -a 'Mail.app'", "Open Mail")


@pytest.fixture
def basic_layers(open_chrome, open_mail):
    """One sublayer (o) and one direct binding (m)."""
    return {
        "o": Sublayer(commands={"g": open_chrome}),
        "m": DirectBinding(command=open_mail),
    }


@pytest.fixture
def three_sublayers(open_chrome, open_mail):
    """Three sublayers plus a direct binding."""
    return {
        "o": Sublayer(commands={"g": open_chrome, "m": open_mail}),
        "w": Sublayer(commands={"h": command("open -g rectangle://execute-action?name=left-half")}),
        "s": Sublayer(commands={"l": command("pmset displaysleepnow")}),
        "spacebar": DirectBinding(command=command("open raycast://clipboard")),
    }


@pytest.fixture
def layers_yaml(tmp_path):
    """Write a small layers file and return its path."""
    path = tmp_path / "layers.yaml"
    path.write_text(
        """
title: Test layers
hyper_key: caps_lock
layers:
  o:
    g:
      app: Google Chrome
  m:
    app: Mail
  x: {}
"""
    )
    return path
