from pathlib import Path

import pytest

from netledger.cli import _parse_args
from netledger.core import config


def test_defaults():
    args = _parse_args([])

    assert args.host == config.HOST
    assert args.port == config.PORT
    assert args.db == config.DB_PATH
    assert args.record_interval == config.RECORD_INTERVAL_SECONDS


def test_overrides():
    args = _parse_args(["--port", "0", "--db", "/tmp/usage.db", "--record-interval", "300"])

    assert args.port == 0
    assert args.db == Path("/tmp/usage.db")
    assert args.record_interval == 300


@pytest.mark.parametrize("argv", [["--port", "70000"], ["--record-interval", "-5"]])
def test_rejects_invalid_values(argv):
    with pytest.raises(SystemExit):
        _parse_args(argv)
