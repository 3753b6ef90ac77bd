import importlib
import logging

import pytest


ENTRYPOINTS = [
    "web.app",
]


@pytest.mark.parametrize("module_name", ENTRYPOINTS)
def test_entrypoint_help(module_name):
    module = importlib.import_module(module_name)
    assert hasattr(module, "main"), f"{module_name} missing main()"

    with pytest.raises(SystemExit) as excinfo:
        module.main(["--help"])

    assert excinfo.value.code == 0


class TestServerMain:
    def test_defaults(self):
        from web.app import build_parser

        args = build_parser().parse_args([])
        assert args.host == "127.0.0.1"
        assert args.port == 5333
        assert args.root == "backgrounds"
        assert args.config is None

    def test_positional_host_and_port(self):
        from web.app import build_parser

        args = build_parser().parse_args(["0.0.0.0", "8080"])
        assert (args.host, args.port) == ("0.0.0.0", 8080)

    def test_missing_config_is_fatal(self, tmp_path, monkeypatch):
        from flask import Flask
        from web.app import main

        started = []
        monkeypatch.setattr(Flask, "run", lambda self, **kw: started.append(kw))

        assert main(["--root", str(tmp_path / "nowhere")]) == 1
        assert started == []

    def test_malformed_config_is_fatal(self, tmp_path, monkeypatch):
        from flask import Flask
        from web.app import main

        (tmp_path / "config.json").write_text("[{")
        monkeypatch.setattr(Flask, "run", lambda self, **kw: None)

        assert main(["--root", str(tmp_path)]) == 1

    def test_starts_after_catalog_is_built(self, asset_root, write_config, monkeypatch):
        from flask import Flask
        from web.app import main

        write_config(asset_root / "config.json", [{"$scan_dir": str(asset_root / "scans")}])
        started = []

        def fake_run(self, **kwargs):
            resp = self.test_client().get("/config.json")
            started.append((kwargs, len(resp.get_json()["videoBackgroundImages"])))

        monkeypatch.setattr(Flask, "run", fake_run)

        assert main(["127.0.0.1", "5999", "--root", str(asset_root), "-q"]) == 0
        assert started == [({"host": "127.0.0.1", "port": 5999, "debug": False}, 2)]


class TestConfigureLogging:
    def test_quiet_hides_access_log(self):
        from logging_utils import configure_logging

        level = configure_logging(quiet=1)
        assert level == logging.WARNING
        assert logging.getLogger("werkzeug").level == logging.WARNING

    def test_explicit_level_wins(self):
        from logging_utils import resolve_log_level

        assert resolve_log_level("debug", verbose=0, quiet=3) == logging.DEBUG

    def test_request_line_format(self, caplog):
        from logging_utils import log_request

        logger = logging.getLogger("tests.requests")
        with caplog.at_level(logging.DEBUG, logger="tests.requests"):
            log_request(logger, None, "GET", "/config.json", 200)
        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "- > GET /config.json: 200"
