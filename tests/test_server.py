"""End-to-end tests over an in-memory MCP session.
Run: pytest tests/test_server.py -v
"""
import json

import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from coolify_mcp import SERVER_NAME
from coolify_mcp.core import config as config_module
from coolify_mcp.core.config import ENV_KEYS
from coolify_mcp.server import build_server, check, main, parse_args

from conftest import SETTINGS, Recorder


class TestMcpSession:
    @pytest.mark.asyncio
    async def test_list_tools(self, dispatcher):
        server = build_server(dispatcher)
        assert server.name == SERVER_NAME
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_tools()
        names = {tool.name for tool in result.tools}
        assert {"list_servers", "create_service_env", "bulk_update_application_envs"} <= names
        assert len(names) == len(dispatcher.specs)

    @pytest.mark.asyncio
    async def test_call_tool_success(self, dispatcher, recorder):
        recorder.body = [{"id": 0, "name": "Root Team"}]
        async with create_connected_server_and_client_session(build_server(dispatcher)) as session:
            result = await session.call_tool("list_teams", {})
        assert not result.isError
        assert json.loads(result.content[0].text) == [{"id": 0, "name": "Root Team"}]

    @pytest.mark.asyncio
    async def test_call_tool_error_keeps_session_alive(self, dispatcher, recorder):
        async with create_connected_server_and_client_session(build_server(dispatcher)) as session:
            bad = await session.call_tool("get_team", {})
            unknown = await session.call_tool("nope", {})
            ok = await session.call_tool("get_team", {"team_id": "0"})
        assert bad.isError
        assert bad.content[0].text.startswith("Error: Invalid arguments for get_team: team_id:")
        assert unknown.isError
        assert unknown.content[0].text == "Error: Unknown tool: nope"
        assert not ok.isError
        assert recorder.last.url.path == "/api/v1/teams/0"


class TestArgs:
    def test_defaults(self):
        args = parse_args([])
        assert not args.check
        assert args.config is None

    def test_check_flag(self):
        args = parse_args(["--check", "--config", "c.yaml"])
        assert args.check
        assert args.config == "c.yaml"


class TestStartup:
    def test_missing_settings_exit_non_zero(self, tmp_path, monkeypatch, capsys):
        for name in list(ENV_KEYS) + ["COOLIFY_MCP_CONFIG"]:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.yaml"), "--log-dir", str(tmp_path / "logs")])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Configuration error: COOLIFY_BASE_URL and COOLIFY_API_TOKEN environment variables are required" in err

    @pytest.mark.asyncio
    async def test_check_reports_failures(self, capsys):
        recorder = Recorder(status_code=500, body=b"")
        status = await check(SETTINGS, transport=httpx.MockTransport(recorder))
        assert status == 1
        report = json.loads(capsys.readouterr().out)
        assert report["base_url"] == "https://coolify.test"
        assert report["version"] == "Error: API Error 500: Internal Server Error"
        assert report["health"] == "Error: Health check failed: API Error 500: Internal Server Error"

    @pytest.mark.asyncio
    async def test_check_succeeds(self, capsys):
        recorder = Recorder(body={"version": "4.0.0"})
        status = await check(SETTINGS, transport=httpx.MockTransport(recorder))
        assert status == 0
        report = json.loads(capsys.readouterr().out)
        assert report["version"] == {"version": "4.0.0"}
        assert [r.url.path for r in recorder.requests] == ["/api/v1/version", "/api/health"]
