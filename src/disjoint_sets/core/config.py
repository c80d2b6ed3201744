"""Configuration management for disjoint-sets."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field


class LoaderConfig(BaseModel):
    """Configuration for reading node and connection files."""

    delimiter: str = Field(
        default=",", min_length=1, description="Field separator in connection files"
    )
    comment_prefix: Annotated[str, Field(min_length=1, max_length=1)] | None = Field(
        default="#", description="Lines starting with this character are skipped"
    )
    index_base: int = Field(
        default=0, ge=0, le=1, description="Index of the first node in index-pair files"
    )


class OutputConfig(BaseModel):
    """Configuration for command output."""

    verbose: bool = Field(default=False, description="Enable verbose logging")


class Config(BaseModel):
    """Main configuration for disjoint-sets."""

    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load and validate configuration from a JSON file.

        Sections missing from the file keep their defaults.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return cls.model_validate_json(config_path.read_text(encoding="utf-8"))

    def save_to_file(self, config_path: Path) -> None:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")


def default_config_paths() -> list[Path]:
    """Locations searched, in order, when no config file is given."""
    return [
        Path.home() / ".config" / "disjoint-sets" / "config.json",
        Path.cwd() / "disjoint-sets.json",
    ]


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration for a command run.

    Args:
        config_path: Explicit configuration file. If None, the first existing
            file from ``default_config_paths`` is used, falling back to
            defaults when there is none.

    Returns:
        Config object
    """
    if config_path is not None:
        return Config.load_from_file(config_path)

    found = next((path for path in default_config_paths() if path.exists()), None)
    return Config.load_from_file(found) if found else Config()
