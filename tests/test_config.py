"""Tests for config file management."""

from nnumber import config
from nnumber.config import load_config, save_config


class TestConfig:
    def test_default_config(self):
        cfg = load_config()
        assert cfg["logging"]["level"] == "WARNING"
        assert cfg["cli"]["normalize_case"] is True

    def test_save_and_load(self):
        cfg = load_config()
        cfg["logging"]["level"] = "DEBUG"
        cfg["cli"]["normalize_case"] = False

        path = save_config(cfg)
        assert path.exists()

        loaded = load_config()
        assert loaded["logging"]["level"] == "DEBUG"
        assert loaded["cli"]["normalize_case"] is False

    def test_null_and_int_values_roundtrip(self):
        cfg = load_config()
        cfg["logging"]["level"] = None
        cfg["cli"]["width"] = 120
        save_config(cfg)

        loaded = load_config()
        assert loaded["logging"]["level"] is None
        assert loaded["cli"]["width"] == 120

    def test_top_level_value(self):
        cfg = load_config()
        cfg["profile"] = "ops"
        save_config(cfg)
        assert load_config()["profile"] == "ops"

    def test_partial_file_keeps_defaults(self):
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_FILE.write_text("# hand edited\nlogging:\n  level: INFO\n")

        loaded = load_config()
        assert loaded["logging"]["level"] == "INFO"
        assert loaded["cli"]["normalize_case"] is True

    def test_scalar_section_keeps_defaults(self, caplog):
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_FILE.write_text("logging: null\ncli: false\n")

        loaded = load_config()
        assert loaded["logging"]["level"] == "WARNING"
        assert loaded["cli"]["normalize_case"] is True
        assert "expected a section" in caplog.text

    def test_scalar_section_does_not_break_cli(self):
        from click.testing import CliRunner

        from nnumber.cli import cli

        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_FILE.write_text("logging: null\n")

        result = CliRunner().invoke(cli, ["to-tail", "A00001"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("N1")

    def test_unreadable_file_falls_back(self, caplog):
        # A directory where the file should be cannot be read
        config.CONFIG_FILE.mkdir(parents=True)

        loaded = load_config()
        assert loaded["logging"]["level"] == "WARNING"
        assert "Could not read" in caplog.text
