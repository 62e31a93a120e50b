"""Tests for complex-modifications document packaging."""

from hyper_layers.config import CompilerConfig, LayersFile
from hyper_layers.document import build_document, build_rules, hyper_key_rule


def test_hyper_key_rule():
    rule = hyper_key_rule("caps_lock", CompilerConfig()).to_dict()
    assert rule == {
        "description": "Hyper Key (caps_lock)",
        "manipulators": [
            {
                "description": "caps_lock -> Hyper Key",
                "type": "basic",
                "from": {"key_code": "caps_lock", "modifiers": {"optional": ["any"]}},
                "to": [{"set_variable": {"name": "hyper", "value": 1}}],
                "to_after_key_up": [{"set_variable": {"name": "hyper", "value": 0}}],
                "to_if_alone": [{"key_code": "escape"}],
            }
        ],
    }


def test_hyper_key_rule_without_alone_key():
    rule = hyper_key_rule("right_command", CompilerConfig(master_variable="meh"), alone_key=None)
    manipulator = rule.manipulators[0]
    assert manipulator.to_if_alone is None
    assert manipulator.to[0].set_variable.name == "meh"


def test_build_rules_prepends_hyper_key():
    layers_file = LayersFile(hyper_key="caps_lock", layers={"m": {"app": "Mail"}})
    rules = build_rules(layers_file)
    assert [r.description for r in rules] == ["Hyper Key (caps_lock)", "Hyper Key + m"]


def test_build_rules_without_hyper_key():
    layers_file = LayersFile(layers={"o": {"g": {"app": "Chrome"}}})
    rules = build_rules(layers_file)
    assert [r.description for r in rules] == ['Hyper Key sublayer "o"']


def test_build_document(layers_yaml):
    from hyper_layers.config import load_layers_file

    document = build_document(load_layers_file(layers_yaml))
    assert document["title"] == "Test layers"
    assert [r["description"] for r in document["rules"]] == [
        "Hyper Key (caps_lock)",
        'Hyper Key sublayer "o"',
        "Hyper Key + m",
        "Hyper Key + x",
    ]
    m_conditions = document["rules"][2]["manipulators"][0]["conditions"]
    assert m_conditions == [
        {"type": "variable_if", "name": "hyper", "value": 1},
        {"type": "variable_if", "name": "hyper_sublayer_o", "value": 0},
    ]


def test_conditions_only_use_variable_if(layers_yaml):
    from hyper_layers.config import load_layers_file

    for rule in build_rules(load_layers_file(layers_yaml)):
        for manipulator in rule.manipulators:
            assert all(c.type == "variable_if" for c in manipulator.conditions or [])
