from __future__ import annotations

import pytest

from selectorkit.config import SelectorKitConfig


class TestSelectorKitConfig:
    def test_default_values(self) -> None:
        cfg = SelectorKitConfig()
        assert cfg.json_indent is None
        assert cfg.json_sort_keys is False
        assert cfg.log_level == "WARNING"

    def test_custom_values(self) -> None:
        cfg = SelectorKitConfig(json_indent=4, json_sort_keys=True, log_level="DEBUG")
        assert cfg.json_indent == 4
        assert cfg.json_sort_keys is True
        assert cfg.log_level == "DEBUG"

    def test_frozen_immutability(self) -> None:
        cfg = SelectorKitConfig()
        with pytest.raises(AttributeError):
            cfg.json_indent = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert SelectorKitConfig() == SelectorKitConfig()
        assert SelectorKitConfig(json_indent=2) != SelectorKitConfig(json_indent=4)


class TestFromEnv:
    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SELECTORKIT_JSON_INDENT", raising=False)
        monkeypatch.delenv("SELECTORKIT_JSON_SORT_KEYS", raising=False)
        monkeypatch.delenv("SELECTORKIT_LOG_LEVEL", raising=False)
        assert SelectorKitConfig.from_env() == SelectorKitConfig()

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTORKIT_JSON_INDENT", "2")
        monkeypatch.setenv("SELECTORKIT_JSON_SORT_KEYS", "true")
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "debug")
        cfg = SelectorKitConfig.from_env()
        assert cfg.json_indent == 2
        assert cfg.json_sort_keys is True
        assert cfg.log_level == "DEBUG"
