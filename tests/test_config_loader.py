import json

import pytest

from mdtoc.errors import ConfigError
from mdtoc.models.configs import TocSettings
from mdtoc.orchestration import load_settings


def test_load_yaml_settings(tmp_path):
    path = tmp_path / "mdtoc.yaml"
    path.write_text("indent: '  '\nmax_heading_depth: 3\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.indent == "  "
    assert settings.to_builder_config().max_depth == 3


def test_load_toml_settings_from_mdtoc_table(tmp_path):
    path = tmp_path / "project.toml"
    path.write_text('[mdtoc]\ngenerated_comment = "<!-- toc -->"\n', encoding="utf-8")

    settings = load_settings(path)

    assert settings.to_renderer_config().generated_comment == "<!-- toc -->"
    assert settings.indent == "\t"


def test_load_json_settings(tmp_path):
    path = tmp_path / "mdtoc.json"
    path.write_text(json.dumps({"max_heading_depth": 6}), encoding="utf-8")

    assert load_settings(path) == TocSettings()


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == TocSettings()


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("bad.yaml", "max_heading_depth: 9\n"),
        ("bad.yaml", "- not\n- a mapping\n"),
        ("bad.ini", "indent = x\n"),
        ("bad.json", "{not json"),
        ("bad.yaml", "unknown_key: 1\n"),
        ("bad.yaml", "generated_comment: \"a\\nb\"\n"),
    ],
)
def test_invalid_settings_raise_config_error(tmp_path, filename, content):
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "nope.yaml")


def test_non_utf8_config_file(tmp_path):
    path = tmp_path / "mdtoc.yaml"
    path.write_bytes("indent: '\xa0'\n".encode("latin-1"))

    with pytest.raises(ConfigError):
        load_settings(path)
