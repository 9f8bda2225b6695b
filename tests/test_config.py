"""
Tests for TOML configuration loading.
"""
import pytest

from shared.config import (
    DisplayConfig,
    GeneratorConfig,
    GlobalConfig,
    GuardConfig,
    get_config,
)


class TestDefaults:
    def test_sections(self):
        config = GuardConfig()
        assert config.generator == GeneratorConfig()
        assert config.display.mask_passwords is True
        assert config.global_settings.log_level == "WARNING"

    def test_to_dict(self):
        data = GuardConfig().to_dict()
        assert set(data) == {"global_settings", "generator", "display"}
        assert data["generator"]["max_attempts"] == 64


class TestLoad:
    def test_load_file(self, tmp_path):
        path = tmp_path / "passguard.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "[generator]\n"
            "seed = 11\n"
            "count = 4\n"
            "[display]\n"
            "show_rules = true\n",
            encoding="utf-8",
        )
        config = GuardConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.generator.seed == 11
        assert config.generator.count == 4
        assert config.generator.max_attempts == 64
        assert config.display == DisplayConfig(mask_passwords=True, show_rules=True)

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "passguard.toml"
        path.write_text(
            "[generator]\ncolour = 'blue'\ncount = 3\n[unknown]\nx = 1\n",
            encoding="utf-8",
        )
        config = GuardConfig.load(path)
        assert config.generator.count == 3

    def test_empty_file(self, tmp_path):
        path = tmp_path / "passguard.toml"
        path.write_text("", encoding="utf-8")
        assert GuardConfig.load(path).global_settings == GlobalConfig()

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GuardConfig.load(tmp_path / "missing.toml")

    def test_get_config_caches(self, tmp_path):
        path = tmp_path / "passguard.toml"
        path.write_text("[generator]\ncount = 5\n", encoding="utf-8")
        loaded = get_config(path)
        assert loaded.generator.count == 5
        assert get_config() is loaded

    def test_version_key_is_ignored(self, tmp_path):
        path = tmp_path / "passguard.toml"
        path.write_text('[global]\nversion = "0.1"\ndebug = true\n', encoding="utf-8")
        settings = GuardConfig.load(path).global_settings
        assert settings.debug is True
        assert not hasattr(settings, "version")
