"""Tests for config loading."""

from optionsengine.config import DEFAULT_CONFIG, load_config


class TestLoadConfig:
    """Config file merged over defaults."""

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.toml")
        assert config == DEFAULT_CONFIG

    def test_defaults_are_not_shared(self, tmp_path):
        config = load_config(tmp_path / "missing.toml")
        config["market"]["volatility"] = "0.9"
        assert DEFAULT_CONFIG["market"]["volatility"] == "0.25"

    def test_partial_section_merges(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[market]\nvolatility = "0.4"\n')

        config = load_config(path)
        assert config["market"]["volatility"] == "0.4"
        assert config["market"]["risk_free_rate"] == "0.05"
        assert config["volatility"]["periods_per_year"] == 365

    def test_new_section_is_kept(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[volatility]\nperiods_per_year = 252\n\n[extra]\nname = "x"\n')

        config = load_config(path)
        assert config["volatility"]["periods_per_year"] == 252
        assert config["extra"] == {"name": "x"}

    def test_unreadable_file_falls_back(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("this is not toml\n")

        assert load_config(path) == DEFAULT_CONFIG
