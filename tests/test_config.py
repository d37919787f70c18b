import json

from pastebininit.config.config import DEFAULT_CONFIG, config_path, load_config


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == DEFAULT_CONFIG


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"format": "python", "privacy": "1", "timeout": 5}))

    config = load_config(str(path))

    assert config["format"] == "python"
    assert config["privacy"] == "1"
    assert config["timeout"] == 5
    assert config["expiration"] == "N"


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"colour": "blue", "expiration": "1W"}))

    config = load_config(str(path))

    assert "colour" not in config
    assert config["expiration"] == "1W"


def test_invalid_json_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = load_config(str(path))

    assert config == DEFAULT_CONFIG
    assert "Error decoding JSON" in caplog.text


def test_non_object_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    assert load_config(str(path)) == DEFAULT_CONFIG


def test_config_path_uses_env_var(monkeypatch, tmp_path):
    monkeypatch.setenv("PASTEBININIT_CONFIG", str(tmp_path / "env.json"))

    assert config_path() == str(tmp_path / "env.json")
    assert config_path(str(tmp_path / "flag.json")) == str(tmp_path / "flag.json")
