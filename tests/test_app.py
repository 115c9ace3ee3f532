import importlib

import pytest

pytest.importorskip("customtkinter")

from ir_learner import app


def test_module_entry_point_runs_app_main():
    module = importlib.import_module("ir_learner.__main__")

    assert module.main is app.main


def test_parse_args_defaults():
    args = app.parse_args([])

    assert args.url is None
    assert args.debug is False


def test_parse_args_url_and_debug():
    args = app.parse_args(["--url", "http://openhab.local:8080/broadlink", "--debug"])

    assert args.url == "http://openhab.local:8080/broadlink"
    assert args.debug is True
