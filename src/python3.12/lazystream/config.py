#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
# SPDX-License-Identifier: BSD-3-Clause


from typing import ClassVar, Literal, Self
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__: list[str] = ['Settings', 'SettingsModel']


class SettingsModel(BaseSettings):
    DEBUG: bool = False
    ON_EMPTY: Literal['silent', 'warn', 'fail'] = 'silent'
    """Default reaction to `head()`/`tail()` on an empty stream."""
    
    model_config = SettingsConfigDict(
        env_prefix = 'LAZYSTREAM_',
        env_file   = '.env'
    )


class Settings:
    __singleton__: ClassVar[SettingsModel]

    def __new__(cls: type[Self]) -> SettingsModel:
        if not hasattr(cls, '__singleton__') or not cls.__singleton__:
            cls.__singleton__ = SettingsModel()
        return cls.__singleton__
    
    @classmethod
    def reload(cls: type[Self]) -> SettingsModel:
        cls.__singleton__ = SettingsModel()
        return cls.__singleton__
