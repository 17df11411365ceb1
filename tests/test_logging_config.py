from coolify_mcp.core.logging_config import resolve_logs_dir


class TestLogsDir:
    def test_default_is_under_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_logs_dir() == (tmp_path / "logs").resolve()

    def test_explicit_dir_wins(self, tmp_path):
        assert resolve_logs_dir(tmp_path / "elsewhere") == (tmp_path / "elsewhere").resolve()
