"""Project path configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PathsConfig(BaseSettings):
    """
    Project path configuration.
    All paths are computed from project_root.
    """
    model_config = SettingsConfigDict(
        env_prefix='PATHS_',
        case_sensitive=False
    )

    # Project root directory (computed)
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    @property
    def data_dir(self) -> Path:
        return self.project_root / "data"

    @property
    def raw_data_dir(self) -> Path:
        """Input CSV exports (tweets.csv, users.csv)"""
        return self.data_dir / "raw"

    @property
    def tweets_file(self) -> Path:
        return self.raw_data_dir / "tweets.csv"

    @property
    def users_file(self) -> Path:
        return self.raw_data_dir / "users.csv"

    @property
    def processed_data_dir(self) -> Path:
        return self.data_dir / "processed"

    @property
    def runs_dir(self) -> Path:
        """Directory for stamped pipeline run outputs"""
        return self.processed_data_dir / "runs"

    def ensure_directories(self) -> None:
        """Create data directories if they don't exist."""
        for directory in (self.raw_data_dir, self.processed_data_dir, self.runs_dir):
            directory.mkdir(parents=True, exist_ok=True)
