"""Runtime settings for enumtags.

Priority chain (highest to lowest):
  1. Explicit overrides passed to :meth:`EnumTagsSettings.from_env`
  2. Env vars — ``ENUMTAGS_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from enumtags.config.logging import configure_logging


class EnumTagsSettings(BaseSettings):
    """Logging switches for applications embedding enumtags.

    Attributes:
        verbose: Emit DEBUG records from the ``enumtags`` loggers.
        log_json: Render records as JSON lines instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENUMTAGS_",
    }

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> EnumTagsSettings:
        """Build settings from the environment, with *overrides* taking priority."""
        return cls(**overrides)

    def configure_logging(self) -> None:
        """Apply these settings via :func:`enumtags.config.logging.configure_logging`."""
        configure_logging(verbose=self.verbose, log_json=self.log_json)
