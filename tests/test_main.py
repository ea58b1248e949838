import logging

import uvicorn

from products_api import __main__ as entry


def _run_main(monkeypatch, argv: list[str]) -> uvicorn.Config:
    started: list[uvicorn.Config] = []

    def fake_run(self: uvicorn.Server, sockets=None) -> None:
        self.started = True
        started.append(self.config)

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)
    monkeypatch.setattr("sys.argv", ["products-api", *argv])

    entry.main()

    assert len(started) == 1
    return started[0]


def test_main_uses_port_from_settings(fresh_logging, monkeypatch) -> None:
    config = _run_main(monkeypatch, [])
    assert config.port == 4000
    assert config.app == "products_api.main:app"


def test_main_accepts_log_level_aliases(fresh_logging, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warn")

    config = _run_main(monkeypatch, ["--port", "4100"])

    assert config.port == 4100
    assert config.log_level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_main_falls_back_to_info_for_unknown_level(fresh_logging, monkeypatch) -> None:
    config = _run_main(monkeypatch, ["--log-level", "chatty"])
    assert config.log_level == logging.INFO
