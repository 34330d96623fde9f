import json

import pytest

from complexity_cli.core.config import AnalyzerConfig, load_config_file
from complexity_cli.core.exceptions import ConfigurationError


def test_defaults():
    config = AnalyzerConfig()
    assert config.sentinel == "END"
    assert config.output_format == "detailed"
    assert config.display.show_reasons is True


def test_from_dict_maps_flat_keys():
    config = AnalyzerConfig.from_dict(
        {"default_format": "table", "show_reasons": False, "max_code_width": 40}
    )
    assert config.output_format == "table"
    assert config.display.show_reasons is False
    assert config.display.max_code_width == 40


def test_from_dict_nested_display():
    config = AnalyzerConfig.from_dict(
        {"sentinel": "STOP", "display": {"show_banner": False}}
    )
    assert config.sentinel == "STOP"
    assert config.display.show_banner is False
    assert config.display.show_summary is True


def test_invalid_output_format():
    with pytest.raises(ConfigurationError):
        AnalyzerConfig.from_dict({"output_format": "xml"})


def test_unknown_key():
    with pytest.raises(ConfigurationError):
        AnalyzerConfig.from_dict({"colour": True})


def test_load_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_format": "json"}))
    assert load_config_file(path) == {"default_format": "json"}


def test_load_config_file_missing_explicit_path(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config_file(tmp_path / "nope.json")
