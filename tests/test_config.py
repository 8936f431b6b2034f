"""Tests for configuration loading and logging setup."""

import json
import logging

import pytest
import yaml

from asat_hor import ConfigurationError, ParseError
from asat_hor.utils.config import (
    create_default_configuration, load_configuration, merge_configurations,
    parser_from_config, save_configuration, validate_configuration_schema
)
from asat_hor.utils.log import configure_logging


class TestDefaultConfiguration:
    def test_default_is_valid(self):
        result = validate_configuration_schema(create_default_configuration())
        assert result.is_valid
        assert result.errors == []

    def test_default_parser_uses_base_grammar(self):
        parser = parser_from_config(create_default_configuration())
        assert parser.arm_qualifiers == ("L", "S")
        assert parser.unique_chromosomes is False


class TestLoadConfiguration:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"grammar": {"extra_arm_qualifiers": ["A"]}}))
        config = load_configuration(path)
        assert config["grammar"]["extra_arm_qualifiers"] == ["A"]
        assert config["grammar"]["unique_chromosomes"] is False
        assert config["logging"]["level"] == "WARNING"

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"grammar": {"unique_chromosomes": True}}))
        parser = parser_from_config(load_configuration(path))
        with pytest.raises(ParseError):
            parser.parse("S1C1/1H1L.1")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_configuration(path) == create_default_configuration()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_configuration(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("")
        with pytest.raises(ConfigurationError):
            load_configuration(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("grammar: [unclosed")
        with pytest.raises(ConfigurationError) as exc_info:
            load_configuration(path)
        assert exc_info.value.config_path == path

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"grammar": {"extra_arm_qualifiers": ["ab"]}}))
        with pytest.raises(ConfigurationError):
            load_configuration(path)


class TestValidation:
    @pytest.mark.parametrize("config", [
        {"grammar": []},
        {"grammar": {"extra_arm_qualifiers": "A"}},
        {"grammar": {"extra_arm_qualifiers": ["a"]}},
        {"grammar": {"unique_chromosomes": "yes"}},
        {"logging": {"level": "LOUD"}},
        {"logging": {"file": 3}},
    ])
    def test_invalid(self, config):
        assert not validate_configuration_schema(config).is_valid

    def test_warnings(self):
        result = validate_configuration_schema(
            {"grammar": {"extra_arm_qualifiers": ["L"]}, "pipeline": {}}
        )
        assert result.is_valid
        assert len(result.warnings) == 2

    def test_merge(self):
        merged = merge_configurations(
            create_default_configuration(), {"logging": {"level": "DEBUG"}}
        )
        assert merged["logging"] == {"level": "DEBUG", "file": None}

    def test_merge_invalid(self):
        with pytest.raises(ConfigurationError):
            merge_configurations(create_default_configuration(), {"logging": {"level": 1}})

    def test_parser_from_invalid_config(self):
        with pytest.raises(ConfigurationError):
            parser_from_config({"grammar": {"extra_arm_qualifiers": ["1"]}})


class TestSaveConfiguration:
    @pytest.mark.parametrize("name", ["config.yaml", "config.json"])
    def test_save_and_load(self, tmp_path, name):
        config = create_default_configuration()
        config["grammar"]["extra_arm_qualifiers"] = ["A", "B"]
        path = tmp_path / name
        save_configuration(config, path)
        assert load_configuration(path) == config

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ConfigurationError):
            save_configuration(create_default_configuration(), tmp_path / "config.txt")


class TestLogging:
    def test_configure_logging(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        log_file = tmp_path / "asat_hor.log"
        try:
            configure_logging({"logging": {"level": "DEBUG", "file": str(log_file)}})
            assert root.level == logging.DEBUG
            logging.getLogger("asat_hor.test").debug("configured")
            for handler in root.handlers:
                handler.flush()
            assert "asat_hor.test - DEBUG - configured" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
