"""Environment configuration for wsdlc-batch.

Settings are read once at startup and not revalidated afterwards:
- WSDLC_PACKAGE_PREFIX: package-name prefix passed to the compiler
- WSDLC_STANDALONE_JAR: standalone mode, true only for "true" (any case)
- WSDLC_COMPILER: import reference of the external compiler
- WSDLC_TEMPLATE_DIR: template directory override
- WSDLC_LOG_LEVEL: log level of structured logs
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

PACKAGE_PREFIX_ENV_VAR = "WSDLC_PACKAGE_PREFIX"
STANDALONE_ENV_VAR = "WSDLC_STANDALONE_JAR"
COMPILER_ENV_VAR = "WSDLC_COMPILER"
TEMPLATE_DIR_ENV_VAR = "WSDLC_TEMPLATE_DIR"
LOG_LEVEL_ENV_VAR = "WSDLC_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def parse_bool(raw: str | None) -> bool:
    """Parse a flag value; only ``true`` (case-insensitive) is true.

    Example:
        >>> parse_bool("TRUE"), parse_bool("yes"), parse_bool(None)
        (True, False, False)
    """
    return raw is not None and raw.strip().lower() == "true"


class BatchSettings(BaseModel):
    """Configuration read from the environment.

    Attributes:
        package_prefix: Package-name prefix, None when unset or empty.
        standalone: Standalone mode flag.
        compiler: Import reference of the compiler, None when unset.
        template_dir: Template directory override, None to use the compiler's
            own or the packaged templates.
        log_level: Structured log level name.

    Example:
        >>> settings = BatchSettings.from_env({"WSDLC_STANDALONE_JAR": "true"})
        >>> settings.standalone
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_prefix: str | None = Field(default=None, description="Package-name prefix")
    standalone: bool = Field(default=False, description="Standalone mode")
    compiler: str | None = Field(default=None, description="Compiler import reference")
    template_dir: Path | None = Field(default=None, description="Template directory override")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Log level")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BatchSettings:
        """Build settings from environment variables.

        Args:
            environ: Variables to read. Defaults to ``os.environ``.

        Returns:
            BatchSettings instance.
        """
        env = os.environ if environ is None else environ
        template_dir = env.get(TEMPLATE_DIR_ENV_VAR)

        return cls(
            package_prefix=env.get(PACKAGE_PREFIX_ENV_VAR) or None,
            standalone=parse_bool(env.get(STANDALONE_ENV_VAR)),
            compiler=env.get(COMPILER_ENV_VAR) or None,
            template_dir=Path(template_dir) if template_dir else None,
            log_level=(env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper(),
        )
