import json
import os

import pytest

from weaponset_rules import beginner_rules
from weaponset_rules.beginner_rules import RulesTableError, get_table
from weaponset_rules.config import _deep_merge, configure, env_overrides, load_configs, table_from_config

def test_deep_merge_simple():
    a = {"ammo_types": {"PP7": "9mm Ammo", "Klobb": "9mm Ammo"}, "default_counts": {"PP7": "50"}}
    b = {"ammo_types": {"Klobb": "Rifle Ammo"}, "default_counts": {"Klobb": "20"}}
    c = _deep_merge(a, b)
    assert c["ammo_types"]["PP7"] == "9mm Ammo" and c["ammo_types"]["Klobb"] == "Rifle Ammo"
    assert c["default_counts"]["PP7"] == "50" and c["default_counts"]["Klobb"] == "20"

def test_env_overrides_parsing(monkeypatch):
    monkeypatch.setenv("WEAPONSET_RULES__DEFAULT_COUNTS__PP7", "100")
    monkeypatch.setenv("WEAPONSET_RULES__AMMO_TYPES__KLOBB", "Rifle Ammo")
    d = env_overrides()
    assert d["default_counts"]["pp7"] == "100"
    assert d["ammo_types"]["klobb"] == "Rifle Ammo"

def test_load_configs_yaml_then_json(tmp_path):
    first = tmp_path / "rules.yaml"
    first.write_text("default_counts:\n  PP7: 100\n  Klobb: 20\n", encoding="utf-8")
    second = tmp_path / "rules.json"
    second.write_text(json.dumps({"default_counts": {"Klobb": 30}}), encoding="utf-8")
    cfg = load_configs([str(first), str(second)])
    assert cfg == {"default_counts": {"PP7": 100, "Klobb": 30}}

def test_load_configs_empty_and_invalid(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_configs([str(empty)]) == {}
    assert load_configs(None) == {}
    listy = tmp_path / "list.yaml"
    listy.write_text("- PP7\n- Klobb\n", encoding="utf-8")
    with pytest.raises(RulesTableError):
        load_configs([str(listy)])

def test_table_from_config_overrides_case_insensitively():
    table = table_from_config({"default_counts": {"pp7": 100}, "ammo_types": {"Phantom": "Rifle Ammo"}})
    assert table.default_count_for("PP7") == "100"
    assert table.ammo_type_for("phantom") == "Rifle Ammo"
    assert table.default_count_for("Klobb") == "100"
    assert table.has_prop("PP7")

def test_table_from_config_without_overrides_matches_defaults():
    table = table_from_config()
    assert table.ammo_type_for("Tazer") == "None"
    assert table.default_count_for("Tazer") == "1"

def test_table_from_config_rejects_one_sided_additions():
    with pytest.raises(RulesTableError):
        table_from_config({"ammo_types": {"Laser Pointer": "None"}})

@pytest.mark.parametrize("section", ["ammo_types", "default_counts"])
def test_table_from_config_rejects_non_mapping_section(section):
    with pytest.raises(RulesTableError, match=section):
        table_from_config({section: ["PP7"]})

def test_bare_section_env_var_is_rejected(monkeypatch):
    monkeypatch.setenv("WEAPONSET_RULES__AMMO_TYPES", "x")
    with pytest.raises(RulesTableError, match="ammo_types"):
        table_from_config(env_overrides())

def test_configure_layers_files_then_env_into_shared_table(tmp_path, monkeypatch):
    monkeypatch.setattr(beginner_rules, "_table", beginner_rules.default_table())
    path = tmp_path / "rules.yaml"
    path.write_text("default_counts:\n  PP7: 100\n  Klobb: 20\nammo_types:\n  Sniper Rifle: 9mm Ammo\n", encoding="utf-8")
    monkeypatch.setenv("WEAPONSET_RULES__DEFAULT_COUNTS__KLOBB", "30")
    table = configure([str(path)])
    assert get_table() is table
    assert beginner_rules.default_count_for("PP7") == "100"
    assert beginner_rules.default_count_for("Klobb") == "30"
    assert beginner_rules.ammo_type_for("sniper rifle") == "9mm Ammo"
    assert beginner_rules.ammo_type_for("Tazer") == "None"

def test_configure_without_sources_keeps_defaults(monkeypatch):
    monkeypatch.setattr(beginner_rules, "_table", beginner_rules.default_table())
    for key in list(os.environ):
        if key.startswith("WEAPONSET_RULES__"):
            monkeypatch.delenv(key)
    table = configure()
    assert table.default_count_for("Golden Gun") == "10"
    assert len(table) == 33
