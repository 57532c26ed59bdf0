"""Configuration management for namecraft."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import ANSWERS_FILENAME, CONFIG_FILENAME, DEFINITION_FILENAME
from .errors import ConfigError


class FilesConfig(BaseModel):
    """Locations of the definition and answer memory files."""

    definition: Path = Path(DEFINITION_FILENAME)
    answers: Path = Path(ANSWERS_FILENAME)


class NamingConfig(BaseModel):
    """How rendered answers are assembled into a name."""

    separator: str = Field(default="_", description="Joins fragments in the final name")
    space_replacement: str = Field(
        default="-", description="Replaces every space in a rendered fragment"
    )
    clear_token: str = Field(
        default="-", min_length=1, description="Input that clears the seeded answer"
    )


class NamecraftConfig(BaseModel):
    """Root configuration for namecraft."""

    files: FilesConfig = Field(default_factory=FilesConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)

    def resolve_files(self, base_dir: Path) -> FilesConfig:
        """Get file locations with relative paths anchored at base_dir."""
        return FilesConfig(
            definition=base_dir / self.files.definition,
            answers=base_dir / self.files.answers,
        )


def load_config(directory: Path) -> NamecraftConfig:
    """Load config from namecraft.toml.

    Args:
        directory: Directory containing namecraft.toml

    Returns:
        Loaded configuration, or defaults if namecraft.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or has invalid values
    """
    config_path = directory / CONFIG_FILENAME
    if not config_path.exists():
        return NamecraftConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return NamecraftConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default namecraft.toml template.

    Args:
        directory: Directory to write namecraft.toml into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILENAME
    template = {
        "files": {"definition": DEFINITION_FILENAME, "answers": ANSWERS_FILENAME},
        # Fragments are joined with the separator; spaces inside a fragment
        # become space_replacement. Typing clear_token at a prompt clears it.
        "naming": {"separator": "_", "space_replacement": "-", "clear_token": "-"},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
