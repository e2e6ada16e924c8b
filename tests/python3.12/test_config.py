import importlib
from types import ModuleType
from typing import Callable, Iterator

from pydantic import ValidationError
from pytest import fixture, raises

import lazystream.core.Cells
from lazystream import *
from lazystream.config import SettingsModel


@fixture
def debug_cells(settings_env: Callable[..., SettingsModel]
) -> Iterator[ModuleType]:
    """`lazystream.core.Cells` re-imported with `DEBUG` on, then restored."""
    original = dict(vars(lazystream.core.Cells))
    settings_env(DEBUG='true')
    yield importlib.reload(lazystream.core.Cells)
    settings_env(DEBUG='false')
    vars(lazystream.core.Cells).clear()
    vars(lazystream.core.Cells).update(original)


def test_settings_is_a_singleton():
    assert Settings() is Settings()
    assert isinstance(Settings(), SettingsModel)

def test_settings_defaults(settings_env: Callable[..., SettingsModel]):
    settings = settings_env()
    assert settings.DEBUG is False
    assert settings.ON_EMPTY == 'silent'
    assert Policy.Default() == Policy(OnEmpty.SILENT)

def test_settings_from_environment(settings_env: Callable[..., SettingsModel]):
    settings = settings_env(ON_EMPTY='fail', DEBUG='true')
    assert settings is Settings()
    assert settings.DEBUG is True
    assert Policy.Default() == Policy(OnEmpty.FAIL)
    with raises(EmptyAccess):
        head(EMPTY)

def test_explicit_policy_wins(settings_env: Callable[..., SettingsModel]):
    settings_env(ON_EMPTY='fail')
    assert head(EMPTY, Policy(OnEmpty.SILENT)) is None

def test_warn_from_environment(settings_env: Callable[..., SettingsModel],
                               log_messages: list[str]):
    settings_env(ON_EMPTY='warn')
    assert tail(EMPTY) is EMPTY
    assert log_messages == ['Attempt to call tail() on empty stream']

def test_settings_rejects_unknown_policy(
        settings_env: Callable[..., SettingsModel]):
    with raises(ValidationError):
        settings_env(ON_EMPTY='loud')

def test_debug_logs_captured_failures(debug_cells: ModuleType,
                                      log_messages: list[str]):
    assert debug_cells.DEBUG is True
    s = debug_cells.node(1, lambda: 1 // 0)
    failed = debug_cells.tail(s)
    assert debug_cells.is_failed(failed)
    with raises(ZeroDivisionError):
        debug_cells.head(failed)
    assert len(log_messages) == 1
    assert log_messages[0].startswith('Captured failure while forcing')

def test_no_failure_logging_without_debug(log_messages: list[str]):
    assert tail(node(1, lambda: 1 // 0)).error.args
    assert log_messages == []
