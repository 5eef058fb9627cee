# tests/unit/test_config.py
import pytest
from pydantic import ValidationError
from unit_batcher.config import Config, load_config

ENV_VARS = ("BATCH_POLICY", "BATCH_SIZE", "BATCH_TARGET_IDS", "LOG_LEVEL")

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

def test_defaults():
    cfg = load_config()
    assert cfg.batch_policy == "size"
    assert cfg.batch_size == 100
    assert cfg.batch_target_ids == frozenset()
    assert cfg.log_level == "INFO"

def test_reads_environment(monkeypatch):
    monkeypatch.setenv("BATCH_POLICY", " Target_Set ")
    monkeypatch.setenv("BATCH_SIZE", "7")
    monkeypatch.setenv("BATCH_TARGET_IDS", "a, b,,c ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.batch_policy == "target_set"
    assert cfg.batch_size == 7
    assert cfg.batch_target_ids == frozenset({"a", "b", "c"})
    assert cfg.log_level == "DEBUG"

@pytest.mark.parametrize("size", ["0", "-1", "lots"])
def test_rejects_bad_batch_size(monkeypatch, size):
    monkeypatch.setenv("BATCH_SIZE", size)
    with pytest.raises(ValidationError):
        load_config()

def test_rejects_unknown_policy(monkeypatch):
    monkeypatch.setenv("BATCH_POLICY", "by_weight")
    with pytest.raises(ValidationError):
        load_config()

def test_target_ids_accept_collections():
    cfg = Config(batch_target_ids=["x", "y", "x"])
    assert cfg.batch_target_ids == frozenset({"x", "y"})
