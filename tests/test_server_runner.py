from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast

from gtd.server.runner import ServerRunner


async def test_server_runner_serves_and_installs_signal_handlers(monkeypatch) -> None:
    calls: list[str] = []
    handlers: list[Any] = []
    configs: list[dict[str, Any]] = []

    class _FakeServer:
        should_exit = False

        async def serve(self) -> None:
            calls.append("serve")

    fake_server = _FakeServer()

    class _FakeLoop:
        def add_signal_handler(self, _sig, handler) -> None:
            calls.append("signal")
            handlers.append(handler)

    monkeypatch.setattr(
        "gtd.server.runner.uvicorn.Config",
        lambda *a, **kw: configs.append(kw) or object(),
    )
    monkeypatch.setattr("gtd.server.runner.uvicorn.Server", lambda _cfg: fake_server)
    monkeypatch.setattr(
        "gtd.server.runner.asyncio.get_running_loop", lambda: _FakeLoop()
    )

    app = cast(Any, SimpleNamespace(state=SimpleNamespace()))
    runner = ServerRunner(app, host="127.0.0.1", port=3000)
    await runner.run()

    assert calls == ["signal", "signal", "serve"]
    assert configs[0]["host"] == "127.0.0.1"
    assert configs[0]["port"] == 3000
    assert configs[0]["log_config"] is None

    # First signal requests graceful shutdown
    handlers[0]()
    assert fake_server.should_exit is True
