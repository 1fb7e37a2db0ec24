"""Tests for the config module."""

import pytest

from metaphone3 import config as cfg
from metaphone3.config import EncoderConfig


@pytest.fixture
def fake_config(monkeypatch):
    """Replace the loaded configuration."""

    def _set(defaults):
        monkeypatch.setattr(cfg, "_config", {"defaults": defaults})

    yield _set
    cfg.reset()


class TestDefaults:
    """Tests for configured defaults."""

    def test_fallbacks(self, fake_config):
        """Test missing keys fall back to hardcoded defaults."""
        fake_config({})
        assert cfg.default_encode_vowels() is False
        assert cfg.default_encode_exact() is False
        assert cfg.default_max_length() == 8
        assert cfg.default_delimiter() == ","

    def test_overrides(self, fake_config):
        """Test configured values are used."""
        fake_config({"encode_vowels": True, "max_length": 12, "delimiter": "|"})
        assert cfg.default_encode_vowels() is True
        assert cfg.default_max_length() == 12
        assert cfg.default_delimiter() == "|"

    def test_invalid_max_length(self, fake_config):
        """Test non-positive or non-integer max_length falls back to 8."""
        fake_config({"max_length": -3})
        assert cfg.default_max_length() == 8
        fake_config({"max_length": "long"})
        assert cfg.default_max_length() == 8

    def test_default_encoder_config(self, fake_config):
        """Test EncoderConfig built from defaults."""
        fake_config({"encode_exact": True, "max_length": 5})
        assert cfg.default_encoder_config() == EncoderConfig(
            encode_vowels=False, encode_exact=True, max_length=5
        )

    def test_load_cached(self):
        """Test load returns the same object until reset."""
        cfg.reset()
        first = cfg.load()
        assert cfg.load() is first
        cfg.reset()
        assert "defaults" in cfg.load()


class TestEncoderConfig:
    """Tests for EncoderConfig dataclass."""

    def test_resolved_max_length(self, fake_config):
        """Test 0 resolves to the configured default."""
        fake_config({"max_length": 6})
        assert EncoderConfig().resolved_max_length() == 6
        assert EncoderConfig(max_length=3).resolved_max_length() == 3

    def test_frozen(self):
        """Test EncoderConfig is immutable."""
        config = EncoderConfig()
        with pytest.raises(AttributeError):
            config.encode_vowels = True


class TestLoad:
    """Tests for reading config files."""

    def test_explicit_path(self, tmp_path):
        """Test a given file is read and missing keys are filled in."""
        path = tmp_path / "config.json"
        path.write_text('{"defaults": {"max_length": 4}}', encoding="utf-8")
        try:
            config = cfg.load(path)
            assert config["defaults"]["max_length"] == 4
            assert config["defaults"]["delimiter"] == ","
            assert cfg.default_max_length() == 4
        finally:
            cfg.reset()

    def test_explicit_path_invalid(self, tmp_path):
        """Test a malformed file given explicitly raises."""
        path = tmp_path / "config.json"
        path.write_text('["not", "an", "object"]', encoding="utf-8")
        try:
            with pytest.raises(ValueError, match="defaults"):
                cfg.load(path)
        finally:
            cfg.reset()

    def test_env_override(self, tmp_path, monkeypatch):
        """Test the environment variable names the file searched first."""
        path = tmp_path / "custom.json"
        path.write_text('{"defaults": {"encode_vowels": true}}', encoding="utf-8")
        monkeypatch.setenv(cfg.CONFIG_ENV, str(path))
        cfg.reset()
        try:
            assert cfg.candidate_paths()[0] == path
            assert cfg.default_encode_vowels() is True
        finally:
            cfg.reset()

    def test_broken_file_skipped(self, tmp_path, monkeypatch):
        """Test an unreadable file in the search path is skipped."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        monkeypatch.setenv(cfg.CONFIG_ENV, str(path))
        cfg.reset()
        try:
            assert cfg.default_max_length() == 8
        finally:
            cfg.reset()
