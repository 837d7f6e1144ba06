"""Unit tests for display settings loading."""

from pathlib import Path

import pytest
import yaml

from sidediff.config import (
    DisplaySettings,
    apply_env_overrides,
    load_display_settings,
    write_default_config,
)
from sidediff.exceptions import ConfigExistsError, InvalidConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("NO_COLOR", "SIDEDIFF_NO_COLOR", "SIDEDIFF_TERMINAL_WIDTH"):
        monkeypatch.delenv(name, raising=False)


class TestDisplaySettings:
    def test_defaults(self):
        settings = DisplaySettings()
        assert settings.use_colors is True
        assert settings.side_by_side_diff is True
        assert settings.diff_context_lines == 3
        assert settings.terminal_width == 120
        assert settings.show_line_numbers is True
        assert settings.syntax_highlighting is True

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(ValueError):
            DisplaySettings(colour=True)


class TestLoadDisplaySettings:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        settings = load_display_settings(tmp_path / "missing.yaml")
        assert settings == DisplaySettings()

    def test_reads_display_section(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("display:\n  use_colors: false\n  terminal_width: 0\n")

        settings = load_display_settings(config)

        assert settings.use_colors is False
        assert settings.terminal_width == 0
        assert settings.show_line_numbers is True

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("")
        assert load_display_settings(config) == DisplaySettings()

    def test_other_sections_are_ignored(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("daemon:\n  poll_rate_ms: 2000\ndisplay:\n  show_line_numbers: no\n")
        assert load_display_settings(config).show_line_numbers is False

    def test_invalid_yaml_raises(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("display: [unclosed\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_display_settings(config)
        assert "sidediff.yaml" in str(exc_info.value)

    def test_non_mapping_root_raises(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigError):
            load_display_settings(config)

    def test_wrong_value_type_raises(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("display:\n  terminal_width: wide\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_display_settings(config)
        assert "terminal_width" in str(exc_info.value)

    def test_unknown_key_raises(self, tmp_path: Path):
        config = tmp_path / "sidediff.yaml"
        config.write_text("display:\n  colour: true\n")
        with pytest.raises(InvalidConfigError):
            load_display_settings(config)

    def test_default_path_is_in_home(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        (tmp_path / ".sidediff.yaml").write_text("display:\n  use_colors: false\n")
        assert load_display_settings().use_colors is False


class TestEnvOverrides:
    def test_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert apply_env_overrides(DisplaySettings()).use_colors is False

    def test_sidediff_no_color(self, monkeypatch):
        monkeypatch.setenv("SIDEDIFF_NO_COLOR", "yes")
        assert apply_env_overrides(DisplaySettings()).use_colors is False

    def test_terminal_width(self, monkeypatch):
        monkeypatch.setenv("SIDEDIFF_TERMINAL_WIDTH", "90")
        assert apply_env_overrides(DisplaySettings()).terminal_width == 90

    def test_bad_width_is_ignored(self, monkeypatch):
        monkeypatch.setenv("SIDEDIFF_TERMINAL_WIDTH", "wide")
        assert apply_env_overrides(DisplaySettings()).terminal_width == 120

    def test_env_applies_on_top_of_file(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "sidediff.yaml"
        config.write_text("display:\n  use_colors: true\n")
        monkeypatch.setenv("NO_COLOR", "1")
        assert load_display_settings(config).use_colors is False


class TestWriteDefaultConfig:
    def test_writes_loadable_defaults(self, tmp_path: Path):
        path = write_default_config(tmp_path / "conf" / "sidediff.yaml")

        data = yaml.safe_load(path.read_text())
        assert data["display"]["terminal_width"] == 120
        assert load_display_settings(path) == DisplaySettings()

    def test_refuses_to_overwrite(self, tmp_path: Path):
        path = tmp_path / "sidediff.yaml"
        path.write_text("display: {}\n")
        with pytest.raises(ConfigExistsError):
            write_default_config(path)
        assert path.read_text() == "display: {}\n"

    def test_overwrite(self, tmp_path: Path):
        path = tmp_path / "sidediff.yaml"
        path.write_text("display: {}\n")
        write_default_config(path, overwrite=True)
        assert "use_colors: true" in path.read_text()
