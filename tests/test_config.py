import json

import pytest

from explorer_parser import config as config_module
from explorer_parser.config import ScraperConfig, apply_overrides, load_config
from explorer_parser.exceptions import ConfigError
from explorer_parser.urls import Cluster


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # No .env pickup and no inherited EXPLORER_* values
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: False)
    for var in config_module.ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    config = load_config()
    assert config == ScraperConfig()
    assert config.cluster is Cluster.DEVNET
    assert config.tx_limit == 10
    assert config.output_file_path is None


def test_file_then_env(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"cluster": "mainnet-beta", "wait_time": 5, "tx_limit": 3}))
    monkeypatch.setenv("EXPLORER_TX_LIMIT", "7")

    config = load_config(path)
    assert config.cluster is Cluster.MAINNET
    assert config.wait_time == 5
    assert config.tx_limit == 7


def test_invalid_cluster(monkeypatch):
    monkeypatch.setenv("EXPLORER_CLUSTER", "localnet")
    with pytest.raises(ConfigError):
        load_config()


def test_unreadable_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")


def test_file_must_be_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)


def test_overrides_skip_none_and_validate():
    config = apply_overrides(ScraperConfig(), cluster="testnet", wait_time=None)
    assert config.cluster is Cluster.TESTNET
    assert config.wait_time == 20.0

    with pytest.raises(ConfigError):
        apply_overrides(config, tx_limit=-1)
