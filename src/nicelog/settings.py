from __future__ import annotations

"""
Environment driven configuration for the default logger.

Every field can be set with a ``NICELOG_`` prefixed environment variable,
e.g. ``NICELOG_LEVEL=warn`` or ``NICELOG_FLAGS=3``.
"""

import os
import typing as t

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .static import DEBUG, INFO, Lcolor, LdefaultFlags, Level
from .utils import get_logging_level


class LoggerSettings(BaseSettings):
    """Settings for loggers built by ``create_default_logger``."""

    level: int = Field(default = INFO, description = 'Minimum level that is written')
    default_level: int = Field(default = INFO, description = 'Level used by print/printf/println')
    flags: int = Field(default = LdefaultFlags, ge = 0)
    prefix: str = ''
    debug_enabled: bool = False
    no_color: bool = False

    model_config = SettingsConfigDict(
        env_prefix = 'NICELOG_',
        case_sensitive = False,
        extra = 'ignore',
    )

    @field_validator('level', 'default_level', mode = 'before')
    @classmethod
    def validate_level(cls, v: t.Any) -> int:
        """
        Accepts level names (``warn``, ``WARNING``) as well as numbers;
        numbers outside the known levels are kept as thresholds
        """
        if isinstance(v, (str, int)):
            return get_logging_level(v)
        return v

    def resolved_level(self) -> int:
        return DEBUG if self.debug_enabled and self.level > DEBUG else self.level

    def resolved_flags(self) -> int:
        """
        Clears the color bit when colors are disabled, either through
        ``NICELOG_NO_COLOR`` or the conventional ``NO_COLOR`` variable
        """
        if self.no_color or os.getenv('NO_COLOR'):
            return self.flags & ~Lcolor
        return self.flags


__all__ = ['LoggerSettings']
