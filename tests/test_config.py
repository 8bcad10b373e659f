"""Tests for config loading and validation."""

import pytest

from career_assistant.config import AppConfig, LLMConfig, ServerConfig, SessionConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-haiku-4-5-20251001"
        assert config.llm.temperature == 0.7
        assert config.llm.max_retries == 0
        assert config.server.cors_origins == ("*",)

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.client.endpoint_url.endswith("/ai-career-assistant")

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  model: test-model\n  temperature: 0.2\n"
            "server:\n  port: 9000\n  cors_origins:\n    - http://localhost:3000\n"
        )
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.llm.temperature == 0.2
        assert config.server.port == 9000
        assert config.server.cors_origins == ("http://localhost:3000",)
        # Defaults for unspecified
        assert config.client.timeout == 120.0

    def test_empty_yaml_gives_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_session_resolved_path(self):
        session = SessionConfig(path="~/session.json")
        assert "~" not in str(session.resolved_path)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"


class TestConfigValidation:
    def test_invalid_temperature(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 1.5\n")
        with pytest.raises(ValueError, match="temperature"):
            load_config(yaml)

    def test_invalid_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_negative_retries(self):
        with pytest.raises(ValueError, match="max_retries"):
            LLMConfig(max_retries=-1)

    def test_invalid_port(self):
        with pytest.raises(ValueError, match="port"):
            ServerConfig(port=70000)

    def test_invalid_client_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("client:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)
