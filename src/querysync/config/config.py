"""Configuration management for querysync."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from querysync.config.file_ops import write_text_file
from querysync.config.paths import default_config_path
from querysync.platform.logging import logger

API_BASE_URL_DEFAULT = "http://localhost:3000/api"
REQUEST_TIMEOUT_SECONDS_DEFAULT = 15.0
MODAL_PARAM_DEFAULT = "modal"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Transport settings
    api_base_url: str = API_BASE_URL_DEFAULT
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS_DEFAULT

    # Query-string parameter holding the modal mode
    modal_param: str = MODAL_PARAM_DEFAULT

    # Age after which cached query results refetch; None keeps them until invalidated
    query_stale_after_seconds: float | None = None

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# querysync configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/querysync.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Portal API base URL used by the fetch command")
        lines.append(f"api_base_url = {self._format_toml_value(config['api_base_url'])}")
        lines.append("# Transport timeout in seconds; expiry surfaces as a timeout error")
        lines.append(
            "request_timeout_seconds = "
            + self._format_toml_value(config["request_timeout_seconds"])
        )
        lines.append("")

        lines.append("# Query-string parameter that carries the modal mode")
        lines.append(f"modal_param = {self._format_toml_value(config['modal_param'])}")
        lines.append("")

        lines.append("# Seconds after which cached query results refetch (optional)")
        lines.append("# Omit to keep results until a mutation invalidates them")
        if config["query_stale_after_seconds"] is not None:
            lines.append(
                "query_stale_after_seconds = "
                + self._format_toml_value(config["query_stale_after_seconds"])
            )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to the portable path.

        Returns:
            Config: Loaded configuration object. Defaults are returned when
            the file does not exist; nothing is written until ``save``.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        source = config_file or default_config_path()

        try:
            if source.exists():
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                for key, value in config_dict.items():
                    if key.endswith("_file") or key.endswith("_dir"):
                        if value and str(value).strip() != "":
                            config_dict[key] = str(value)
                        else:
                            config_dict[key] = None

                logger.info("Configuration loaded from %s", source)
                instance = cls(**config_dict)
            else:
                instance = cls()

            cls._instance = instance
            cls._loaded_from = source
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
