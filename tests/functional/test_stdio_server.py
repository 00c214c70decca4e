#!/usr/bin/env python3
"""
Functional tests for the stdio bootstrap.

Starts app/main.py as a subprocess and talks JSON-RPC to it over
stdin/stdout, the way an MCP host does.

Usage:
    pytest tests/functional/test_stdio_server.py -v
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


PROJECT_ROOT = Path(__file__).parent.parent.parent
MAIN_PY = PROJECT_ROOT / "app" / "main.py"


class MCPStdioTestClient:
    """Simple MCP client for testing via stdio transport."""

    def __init__(self, server_cmd: list[str], env: dict[str, str]):
        self.server_cmd = server_cmd
        self.env = env
        self.process: subprocess.Popen | None = None
        self.request_id = 0

    def _next_id(self) -> int:
        self.request_id += 1
        return self.request_id

    def start(self):
        """Start the MCP server process."""
        self.process = subprocess.Popen(
            self.server_cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            bufsize=1,
            env=self.env,
        )

    def stop(self):
        """Stop the MCP server process."""
        if self.process:
            self.process.terminate()
            try:
                self.process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self.process.kill()

    def _write(self, message: dict) -> None:
        if not self.process or not self.process.stdin:
            raise RuntimeError("Server process not started")
        self.process.stdin.write(json.dumps(message) + "\n")
        self.process.stdin.flush()

    def notify(self, method: str, params: dict | None = None) -> None:
        """Send a JSON-RPC notification."""
        message = {"jsonrpc": "2.0", "method": method}
        if params:
            message["params"] = params
        self._write(message)

    def send_request(self, method: str, params: dict | None = None) -> dict:
        """Send a JSON-RPC request and return the response."""
        request_id = self._next_id()
        request = {"jsonrpc": "2.0", "id": request_id, "method": method}
        if params:
            request["params"] = params
        self._write(request)

        # Skip notifications until our response arrives
        for _ in range(50):
            response_str = self.process.stdout.readline()
            if not response_str:
                stderr = self.process.stderr.read(1000) if self.process.stderr else ""
                raise RuntimeError(f"No response from server. stderr: {stderr}")

            response = json.loads(response_str)
            if "method" in response and "id" not in response:
                continue
            if response.get("id") == request_id:
                return response

        raise RuntimeError(f"Did not receive response for request {request_id}")

    def initialize(self) -> dict:
        """Run the initialize handshake."""
        response = self.send_request("initialize", {
            "protocolVersion": "2024-11-05",
            "capabilities": {},
            "clientInfo": {"name": "functional-test-client", "version": "1.0.0"},
        })
        self.notify("notifications/initialized")
        return response

    def call_tool(self, name: str, arguments: dict) -> dict:
        """Call a tool with arguments."""
        return self.send_request("tools/call", {"name": name, "arguments": arguments})


@pytest.fixture
def stdio_client(tmp_path):
    """Start the server with an empty config dir and no image token."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("GREETING_MCP_")}
    env.pop("HF_TOKEN", None)
    env["PYTHONIOENCODING"] = "utf-8"

    client = MCPStdioTestClient(
        [sys.executable, str(MAIN_PY), "--config-dir", str(tmp_path)],
        env,
    )
    client.start()
    yield client
    client.stop()


class TestStdioServer:
    """End-to-end checks over a real stdio pipe."""

    def test_initialize_reports_server_info(self, stdio_client):
        response = stdio_client.initialize()
        assert "result" in response, response
        assert response["result"]["serverInfo"]["name"] == "greeting-server"
        capabilities = response["result"]["capabilities"]
        assert "tools" in capabilities
        assert "resources" in capabilities
        assert "prompts" in capabilities

    def test_tools_list(self, stdio_client):
        stdio_client.initialize()
        response = stdio_client.send_request("tools/list")
        names = {tool["name"] for tool in response["result"]["tools"]}
        assert names == {"greeting", "calculator", "getCurrentTime", "generateImage"}

    def test_greeting_call(self, stdio_client):
        stdio_client.initialize()
        response = stdio_client.call_tool("greeting", {"name": "지수", "language": "korean"})
        result = response["result"]
        assert not result.get("isError")
        assert result["content"] == [{"type": "text", "text": "안녕하세요, 지수님!"}]

    def test_missing_token_is_a_tool_error(self, stdio_client):
        stdio_client.initialize()
        response = stdio_client.call_tool("generateImage", {"prompt": "a cat"})
        result = response["result"]
        assert result["isError"] is True
        assert "HF_TOKEN" in result["content"][0]["text"]


class TestMainExitCodes:
    """Exit codes of the entry point."""

    def test_invalid_config_exits_nonzero(self, tmp_path, capsys):
        import main

        (tmp_path / "config.yaml").write_text("time:\n  default_timezone: Not/AZone\n")
        assert main.main(["--config-dir", str(tmp_path)]) == 1
        assert "Error loading configuration" in capsys.readouterr().err

    def test_malformed_config_exits_nonzero(self, tmp_path, capsys):
        import main

        (tmp_path / "config.yaml").write_text("time: [unclosed\n")
        assert main.main(["--config-dir", str(tmp_path)]) == 1
        assert "not valid YAML" in capsys.readouterr().err

    def test_transport_failure_exits_nonzero(self, tmp_path, capsys):
        import main

        server = MagicMock()
        server.run.side_effect = OSError("stdin is closed")
        with patch.object(main, "create_server", return_value=server):
            assert main.main(["--config-dir", str(tmp_path)]) == 1
        assert "Server error: stdin is closed" in capsys.readouterr().err

    def test_keyboard_interrupt_is_clean(self, tmp_path):
        import main

        server = MagicMock()
        server.run.side_effect = KeyboardInterrupt
        with patch.object(main, "create_server", return_value=server):
            assert main.main(["--config-dir", str(tmp_path)]) == 0
        server.run.assert_called_once_with(transport="stdio")
