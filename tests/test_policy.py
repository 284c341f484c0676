import importlib

import pytest


def test_policy_defaults(monkeypatch):
    monkeypatch.delenv("THRESHOLD_VSS_MAX_WORKERS", raising=False)
    from threshold_vss.policy import DEFAULT_MAX_WORKERS, load_policy

    policy = load_policy()
    assert policy.default_prime == 2**31 - 1
    assert policy.default_generator == 2
    assert policy.max_workers == DEFAULT_MAX_WORKERS


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("THRESHOLD_VSS_MAX_WORKERS", "12")

    policy_module = importlib.import_module("threshold_vss.policy")
    reloaded = importlib.reload(policy_module)

    try:
        assert reloaded.policy.max_workers == 12
    finally:
        monkeypatch.delenv("THRESHOLD_VSS_MAX_WORKERS", raising=False)
        importlib.reload(policy_module)


@pytest.mark.parametrize("raw", ["many", "0", "-3"])
def test_policy_invalid_override_falls_back(monkeypatch, raw):
    monkeypatch.setenv("THRESHOLD_VSS_MAX_WORKERS", raw)
    from threshold_vss.policy import DEFAULT_MAX_WORKERS, load_policy

    assert load_policy().max_workers == DEFAULT_MAX_WORKERS


def test_policy_is_frozen():
    from dataclasses import FrozenInstanceError

    from threshold_vss.policy import policy

    with pytest.raises(FrozenInstanceError):
        policy.max_workers = 1
