import pytest

from swamd.config import DEFAULT_EXCLUDE_DIRS, Settings, load_settings
from swamd.errors import ConfigError


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.path == "."
        assert s.output == "api_spec.md"
        assert s.lang == "go"
        assert s.exclude_dirs == DEFAULT_EXCLUDE_DIRS

    def test_unknown_language_rejected(self):
        with pytest.raises(ValueError):
            Settings(lang="cobol")


class TestLoadSettings:
    def test_no_file_gives_defaults(self):
        assert load_settings(None) == Settings()

    def test_load_yaml(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("path: handlers\noutput: docs/api.md\nlang: python\nexclude_dirs: [build]\n")
        s = load_settings(cfg)
        assert s.path == "handlers"
        assert s.output == "docs/api.md"
        assert s.lang == "python"
        assert s.exclude_dirs == ["build"]

    def test_empty_file_gives_defaults(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("")
        assert load_settings(cfg) == Settings()

    def test_invalid_yaml(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("path: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_settings(cfg)

    def test_non_mapping(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_settings(cfg)

    def test_unknown_key(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("colour: blue\n")
        with pytest.raises(ConfigError, match="invalid settings"):
            load_settings(cfg)

    def test_bad_language(self, tmp_path):
        cfg = tmp_path / "swamd.yaml"
        cfg.write_text("lang: cobol\n")
        with pytest.raises(ConfigError):
            load_settings(cfg)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read config file"):
            load_settings(tmp_path / "nope.yaml")
