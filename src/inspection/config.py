"""
Runtime settings for table inspection.

Values come from environment variables; CLI flags override them.

Environment variables:
    INSPECTION_NAME_COLUMNS: Comma-separated reference columns checked for
        identity duplicates (default: Oid)
    INSPECTION_OUTPUT_FORMAT: console, json or csv (default: console)
    LOG_LEVEL: Log level (default: INFO)
    LOG_JSON: Emit JSON log records (default: false)
    LOG_FILE: Rotating log file, in addition to stderr (default: none)
    OTLP_ENDPOINT: OTLP collector endpoint; tracing stays off when unset
"""

import os
from dataclasses import dataclass, field

OUTPUT_FORMATS = ("console", "json", "csv")


def parse_column_list(value: str | None) -> list[str]:
    """Split a comma-separated column list, dropping blanks."""
    if not value:
        return []
    return [column.strip() for column in value.split(",") if column.strip()]


@dataclass
class InspectionSettings:
    name_columns: list[str] = field(default_factory=lambda: ["Oid"])
    output_format: str = "console"
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None
    otlp_endpoint: str | None = None

    @classmethod
    def from_env(cls) -> "InspectionSettings":
        """
        Build settings from environment variables

        Raises:
            ValueError: If INSPECTION_OUTPUT_FORMAT is not a known format
        """
        output_format = os.getenv("INSPECTION_OUTPUT_FORMAT", "console").lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"INSPECTION_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {output_format!r}"
            )

        name_columns = os.getenv("INSPECTION_NAME_COLUMNS")

        return cls(
            name_columns=parse_column_list(name_columns) if name_columns is not None else ["Oid"],
            output_format=output_format,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
            log_file=os.getenv("LOG_FILE") or None,
            otlp_endpoint=os.getenv("OTLP_ENDPOINT") or None,
        )
