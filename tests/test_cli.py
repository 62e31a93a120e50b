"""CLI tests."""

import json

import pytest

from hyper_layers.cli import create_parser, main


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCompileCommand:
    def test_writes_json(self, layers_yaml, tmp_path, capsys):
        out = tmp_path / "hyper.json"
        assert run(["compile", "-i", str(layers_yaml), "-o", str(out)]) == 0

        document = json.loads(out.read_text())
        assert document["title"] == "Test layers"
        assert len(document["rules"]) == 4
        assert "Wrote 4 rules" in capsys.readouterr().out

    def test_stdout(self, layers_yaml, capsys):
        assert run(["compile", "-i", str(layers_yaml)]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["rules"][1]["description"] == 'Hyper Key sublayer "o"'

    def test_missing_file(self, tmp_path, capsys):
        assert run(["compile", "-i", str(tmp_path / "missing.yaml")]) == 1
        assert "Layers file not found" in capsys.readouterr().err

    def test_unknown_key(self, tmp_path, capsys):
        path = tmp_path / "layers.yaml"
        path.write_text("layers:\n  o:\n    chrome:\n      app: Chrome\n")
        assert run(["compile", "-i", str(path)]) == 1
        assert "Unknown key code 'chrome'" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "layers.yaml"
        path.write_text("hyper_key: capslock\n")
        assert run(["compile", "-i", str(path)]) == 1
        assert "Error:" in capsys.readouterr().err


class TestVariablesCommand:
    def test_lists_sublayer_variables(self, layers_yaml, capsys):
        assert run(["variables", "-i", str(layers_yaml)]) == 0
        out = capsys.readouterr().out
        assert "Master variable: hyper" in out
        assert "  - hyper_sublayer_o" in out
        assert "hyper_sublayer_x" not in out
        assert "hyper_sublayer_m" not in out


class TestKeysCommand:
    def test_lists_keys(self, capsys):
        assert run(["keys"]) == 0
        keys = capsys.readouterr().out.split()
        assert "caps_lock" in keys
        assert keys == sorted(keys)


def test_subcommand_required():
    with pytest.raises(SystemExit):
        create_parser().parse_args([])
