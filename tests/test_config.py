"""
Tests for environment-based console configuration.
"""

import pytest

from spaceship import config as config_module
from spaceship.config import ConsoleConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the real environment and any .env file."""
    for name in (
        config_module.SEED_ENV_VAR,
        config_module.INTERACTIVE_ENV_VAR,
        config_module.LOG_LEVEL_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: False)


class TestConsoleConfig:
    """Tests for ConsoleConfig.from_env."""

    def test_defaults(self):
        config = ConsoleConfig.from_env()
        assert config.seed is None
        assert config.interactive is True
        assert config.log_level == "WARNING"

    def test_seed(self, monkeypatch):
        monkeypatch.setenv("SPACESHIP_SEED", "42")
        assert ConsoleConfig.from_env().seed == 42

    def test_invalid_seed(self, monkeypatch):
        monkeypatch.setenv("SPACESHIP_SEED", "forty-two")
        with pytest.raises(ValueError, match="SPACESHIP_SEED"):
            ConsoleConfig.from_env()

    @pytest.mark.parametrize("value", ["0", "false", "No", " off "])
    def test_interactive_disabled(self, monkeypatch, value):
        monkeypatch.setenv("SPACESHIP_INTERACTIVE", value)
        assert ConsoleConfig.from_env().interactive is False

    @pytest.mark.parametrize("value", ["1", "true", "yes"])
    def test_interactive_enabled(self, monkeypatch, value):
        monkeypatch.setenv("SPACESHIP_INTERACTIVE", value)
        assert ConsoleConfig.from_env().interactive is True

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("SPACESHIP_LOG_LEVEL", "debug")
        assert ConsoleConfig.from_env().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("SPACESHIP_LOG_LEVEL", "loud")
        with pytest.raises(ValueError, match="SPACESHIP_LOG_LEVEL"):
            ConsoleConfig.from_env()

    def test_log_level_whitespace_trimmed(self, monkeypatch):
        monkeypatch.setenv("SPACESHIP_LOG_LEVEL", " info ")
        assert ConsoleConfig.from_env().log_level == "INFO"

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        """Values in a .env file in the working directory are picked up."""
        from dotenv import load_dotenv

        (tmp_path / ".env").write_text("SPACESHIP_SEED=7\nSPACESHIP_INTERACTIVE=off\n")
        monkeypatch.setattr(
            config_module, "load_dotenv", lambda: load_dotenv(tmp_path / ".env")
        )
        # clean_env already registered these variables, so monkeypatch
        # restores them after load_dotenv writes os.environ
        config = ConsoleConfig.from_env()
        assert config.seed == 7
        assert config.interactive is False
