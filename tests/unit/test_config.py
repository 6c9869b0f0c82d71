"""Unit tests for configuration loading."""

import os

from tandem.config import DEFAULT_MODEL, AgentConfig, ClientConfig, GitHubConfig


class TestClientConfig:
    def test_defaults(self):
        cfg = ClientConfig()
        assert cfg.model == DEFAULT_MODEL == "gemini-2.0-flash"
        assert cfg.temperature == 0.7
        assert cfg.top_p == 0.95
        assert cfg.max_output_tokens == 2048
        assert cfg.api_key is None

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        monkeypatch.delenv("GEMINI_BASE_URL", raising=False)
        cfg = ClientConfig.from_env(tmp_path / "missing.env")
        assert cfg.api_key == "env-key"
        assert cfg.model == "gemini-2.5-pro"
        assert cfg.base_url is None

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        env = tmp_path / ".env"
        env.write_text("GEMINI_API_KEY=file-key\n")
        cfg = ClientConfig.from_env(env)
        assert cfg.api_key == "file-key"
        assert cfg.model == DEFAULT_MODEL
        os.environ.pop("GEMINI_API_KEY", None)

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GEMINI_API_KEY", "process-key")
        env = tmp_path / ".env"
        env.write_text("GEMINI_API_KEY=file-key\n")
        assert ClientConfig.from_env(env).api_key == "process-key"


class TestGitHubConfig:
    def test_defaults(self):
        cfg = GitHubConfig()
        assert cfg.base_url == "https://api.github.com"
        assert cfg.api_version == "2022-11-28"
        assert cfg.token is None

    def test_token_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_x")
        assert GitHubConfig.from_env(tmp_path / "missing.env").token == "ghp_x"


class TestAgentConfig:
    def test_defaults(self):
        cfg = AgentConfig(agent_id="a", display_name="A")
        assert cfg.system_instruction is None
        assert cfg.model is None
