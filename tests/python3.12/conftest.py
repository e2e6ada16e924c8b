from typing import Any, Callable, Iterator

import loguru as LG
from pytest import MonkeyPatch, fixture

from lazystream import Settings
from lazystream.config import SettingsModel


@fixture
def log_messages() -> Iterator[list[str]]:
    """Messages loguru emits while the test runs."""
    messages: list[str] = []
    handler_id = LG.logger.add(
        lambda m: messages.append(m.record['message']),
        level='DEBUG', format='{message}')
    yield messages
    LG.logger.remove(handler_id)


@fixture
def settings_env(monkeypatch: MonkeyPatch
) -> Iterator[Callable[..., SettingsModel]]:
    """Reload `Settings` with `LAZYSTREAM_*` variables set."""
    def apply(**env: Any) -> SettingsModel:
        for name, value in env.items():
            monkeypatch.setenv(f'LAZYSTREAM_{name}', str(value))
        return Settings.reload()
    yield apply
    monkeypatch.undo()
    Settings.reload()
