import json

import pytest

from ublgen.config import GeneratorConfig, load_config
from ublgen.exceptions import ConfigurationError


def test_defaults():
    config = GeneratorConfig()
    assert config.root_namespace == "Ubl"
    assert config.optimize is False
    assert config.strict is False
    assert config.schema_dir is None


def test_load_yaml(tmp_path):
    path = tmp_path / "ublgen.yaml"
    path.write_text("root_namespace: Acme.Ubl\noptimize: true\nschema_dir: xsd\n", encoding="utf-8")

    config = load_config(str(path))
    assert config.root_namespace == "Acme.Ubl"
    assert config.optimize is True
    assert str(config.schema_dir) == "xsd"


def test_load_json(tmp_path):
    path = tmp_path / "ublgen.json"
    path.write_text(json.dumps({"root_namespace": "Ubl2", "strict": True}), encoding="utf-8")

    config = load_config(str(path))
    assert config.root_namespace == "Ubl2"
    assert config.strict is True


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == GeneratorConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "nope.yaml"))


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        load_config(str(path))
    assert "Invalid JSON" in str(excinfo.value)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("root_namespace: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("root", ["", "Ubl..Cac", "1Ubl", "Ubl-2"])
def test_invalid_root_namespace(tmp_path, root):
    path = tmp_path / "root.json"
    path.write_text(json.dumps({"root_namespace": root}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "extra.yaml"
    path.write_text("optimise: true\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_merged_overrides():
    config = GeneratorConfig(root_namespace="Ubl", optimize=True)
    merged = config.merged(root_namespace="Other", optimize=None, strict=True)

    assert merged.root_namespace == "Other"
    assert merged.optimize is True
    assert merged.strict is True
    assert config.root_namespace == "Ubl"
