import pytest

from coolify_mcp.core.config import DEFAULT_TIMEOUT_MS, load_settings
from coolify_mcp.core.errors import ConfigurationError

ENV = {"COOLIFY_BASE_URL": "https://coolify.test/", "COOLIFY_API_TOKEN": "tok"}


@pytest.fixture
def no_file(tmp_path):
    return tmp_path / "absent.yaml"


class TestLoadSettings:
    def test_env_only(self, no_file):
        settings = load_settings(no_file, environ=ENV)
        assert settings.base_url == "https://coolify.test"
        assert settings.api_token == "tok"
        assert settings.timeout == DEFAULT_TIMEOUT_MS == 30000
        assert settings.timeout_seconds == 30.0

    def test_missing_everything(self, no_file):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(no_file, environ={})
        assert str(exc_info.value) == "COOLIFY_BASE_URL and COOLIFY_API_TOKEN environment variables are required"

    def test_missing_token(self, no_file):
        with pytest.raises(ConfigurationError, match="COOLIFY_API_TOKEN environment variable is required"):
            load_settings(no_file, environ={"COOLIFY_BASE_URL": "https://coolify.test"})

    def test_timeout_from_env(self, no_file):
        settings = load_settings(no_file, environ=dict(ENV, COOLIFY_TIMEOUT="5000"))
        assert settings.timeout == 5000

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_bad_timeout(self, no_file, raw):
        with pytest.raises(ConfigurationError):
            load_settings(no_file, environ=dict(ENV, COOLIFY_TIMEOUT=raw))

    def test_yaml_file_with_env_override(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "coolify_base_url: https://from-file.test\n"
            "coolify_api_token: file-token\n"
            "coolify_timeout: 1000\n"
            "log_level: debug\n",
            encoding="utf-8",
        )
        settings = load_settings(path, environ={"COOLIFY_API_TOKEN": "env-token"})
        assert settings.base_url == "https://from-file.test"
        assert settings.api_token == "env-token"
        assert settings.timeout == 1000
        assert settings.log_level == "DEBUG"

    def test_config_path_from_env(self, tmp_path):
        path = tmp_path / "other.yaml"
        path.write_text("coolify_base_url: https://other.test\ncoolify_api_token: t\n", encoding="utf-8")
        settings = load_settings(environ={"COOLIFY_MCP_CONFIG": str(path)})
        assert settings.base_url == "https://other.test"

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(path, environ=ENV)

    def test_repr_hides_token(self, no_file):
        settings = load_settings(no_file, environ=dict(ENV, COOLIFY_API_TOKEN="1|s3cr3t"))
        assert "s3cr3t" not in repr(settings)
