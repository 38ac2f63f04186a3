import logging

import pytest

import main


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.config == "clock.yaml"
    assert args.log_level == "INFO"
    assert not args.fullscreen


def test_parse_args_rejects_bad_level():
    with pytest.raises(SystemExit):
        main.parse_args(["--log-level", "LOUD"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--version"])
    assert main.__version__ in capsys.readouterr().out


def test_setup_logging_sets_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    main.setup_logging("debug")
    assert calls["level"] == logging.DEBUG
