"""
Basic tests for configuration validation and color normalization.
"""

import dataclasses

import pytest

from splashpatch.colors import normalize_color, parse_color
from splashpatch.config import Configuration, ConfigurationError, validate_configuration
from splashpatch.constants import Mode, Platform
from splashpatch.project import PROJECT_ROOT_ENV, get_project_root


class TestColors:
    """Test color normalization."""

    @pytest.mark.parametrize("value, expected", [
        ("#fff", "#FFFFFF"),
        ("#ff000080", "#FF000080"),
        ("#0f08", "#00FF0088"),
        ("#123abc", "#123ABC"),
        ("rgb(255, 0, 0)", "#FF0000"),
        ("rgba(0, 0, 255, 0.5)", "#0000FF80"),
        ("rgba(0, 0, 0, 50%)", "#00000080"),
        ("hsl(120, 100%, 50%)", "#00FF00"),
        ("hsla(240, 100%, 50%, 1)", "#0000FF"),
        ("hsl(0.5turn, 100%, 50%)", "#00FFFF"),
        ("navy", "#000080"),
        ("White", "#FFFFFF"),
        ("transparent", "#00000000"),
    ])
    def test_normalize(self, value, expected):
        assert normalize_color(value) == expected

    @pytest.mark.parametrize("value", ["", "#12", "#12345", "fff", "notacolor", "rgb(1, 2)", "rgb(100%, 0%, 0%)"])
    def test_invalid(self, value):
        assert normalize_color(value) is None

    def test_opaque_alpha_is_dropped(self):
        assert parse_color("#000000ff") == (0, 0, 0, 1.0)
        assert normalize_color("#000000ff") == "#000000"


class TestValidation:
    """Test configuration validation."""

    def test_defaults(self):
        config = validate_configuration("red")
        assert config == Configuration(background_color="#FF0000", mode=Mode.CONTAIN, platform=Platform.ALL)

    def test_configuration_is_immutable(self):
        config = validate_configuration("red")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.background_color = "#000000"

    def test_native_mode_requires_android(self):
        with pytest.raises(ConfigurationError, match="Invalid platform all selected for mode native"):
            validate_configuration("#FFFFFF", mode="native")
        assert validate_configuration("#FFFFFF", mode="native", platform="android").mode == Mode.NATIVE

    def test_unknown_mode_and_platform(self):
        with pytest.raises(ConfigurationError, match="Unknown value cover for option mode"):
            validate_configuration("#FFFFFF", mode="cover")
        with pytest.raises(ConfigurationError, match="Unknown value web for option platform"):
            validate_configuration("#FFFFFF", platform="web")

    def test_missing_image(self, tmp_path):
        with pytest.raises(ConfigurationError, match="No such file"):
            validate_configuration("#FFFFFF", tmp_path / "missing.png")

    def test_image_must_be_png(self, tmp_path):
        image = tmp_path / "splash.jpg"
        image.write_bytes(b"jpg")
        with pytest.raises(ConfigurationError, match="is not a .png file"):
            validate_configuration("#FFFFFF", image)

    def test_image_path_is_resolved(self, splash_image, monkeypatch):
        monkeypatch.chdir(splash_image.parent)
        config = validate_configuration("#FFFFFF", "splash.png")
        assert config.image_path == splash_image.resolve()

    def test_invalid_color(self):
        with pytest.raises(ConfigurationError, match="invalid argument bogus as backgroundColor"):
            validate_configuration("bogus")

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestProjectRoot:
    def test_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path))
        assert get_project_root() == tmp_path.resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.delenv(PROJECT_ROOT_ENV, raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_project_root() == tmp_path.resolve()
