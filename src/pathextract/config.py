"""Command-line configuration.

The extractor itself is stateless and takes no configuration.  CLIConfig
is a frozen dataclass, immutable after creation, no string-key dict
lookups.
"""

import os
from dataclasses import dataclass, field

OUTPUT_FORMATS = ("json", "text")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

LOG_LEVEL_ENV = "PATHEXTRACT_LOG_LEVEL"


def _default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "warning").lower()


@dataclass(frozen=True, slots=True)
class CLIConfig:
    """Settings for the ``pathextract`` command. Immutable after creation.

    Override what you need::

        config = CLIConfig(output="text", log_level="debug")
    """

    output: str = "json"
    log_level: str = field(default_factory=_default_log_level)

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_FORMATS:
            msg = f"output must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output!r}"
            raise ValueError(msg)
        if self.log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ValueError(msg)
