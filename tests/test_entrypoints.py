from __future__ import annotations

import runpy


def test_server_module_entrypoint(monkeypatch):
    captured: dict[str, object] = {}

    def fake_main(argv=None):
        captured["argv"] = argv

    monkeypatch.setattr("mcp_arr.server.cli.main", fake_main)

    runpy.run_module("mcp_arr.server", run_name="__main__")

    assert captured["argv"] is None
