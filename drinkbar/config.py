"""Runtime settings for drinkbar sessions.

Settings come from DRINKBAR_* environment variables, then CLI options
override whatever the environment set. Self-contained: no config files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "DRINKBAR_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class ConfigError(ValueError):
    """A setting has a value drinkbar cannot use."""


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    """Read a boolean env var, rejecting values that are neither on nor off."""
    raw = env.get(key, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be one of {', '.join(_TRUE_VALUES + _FALSE_VALUES[:-1])}, got {raw!r}")


@dataclass
class Settings:
    """Resolved session settings."""

    # End the session after the first completed action instead of looping
    one_shot: bool = False
    locale_name: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from DRINKBAR_ONE_SHOT, DRINKBAR_LOCALE, DRINKBAR_VERBOSE."""
        env = os.environ if env is None else env
        return cls(
            one_shot=_env_flag(env, f"{ENV_PREFIX}ONE_SHOT"),
            locale_name=env.get(f"{ENV_PREFIX}LOCALE") or None,
            verbose=_env_flag(env, f"{ENV_PREFIX}VERBOSE"),
        )

    def override(
        self,
        one_shot: Optional[bool] = None,
        locale_name: Optional[str] = None,
        verbose: Optional[bool] = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        return Settings(
            one_shot=self.one_shot if one_shot is None else one_shot,
            locale_name=self.locale_name if locale_name is None else (locale_name or None),
            verbose=self.verbose if verbose is None else verbose,
        )
