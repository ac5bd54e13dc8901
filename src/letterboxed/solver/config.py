"""Letterboxed solver configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letterboxed solver.

    Each setting can be overridden with an environment variable (or `.env` entry) named
    after the field with a `LETTERBOXED_` prefix, e.g. `LETTERBOXED_LOG_DIR`.
    """

    word_list_path: str = "words.txt"
    """Path to the newline-delimited word list.  If the path does not exist, parent
    directories of the package are searched for a file with the same name."""

    min_word_length: int = Field(default=3, ge=3)
    """Minimum number of letters for a word list entry to be loaded. At least 3. Default: 3."""

    log_dir: str | None = "logs"
    """Directory for per-run log files. If None or empty, no log file is written."""

    show_timings: bool = True
    """Whether to print load and solve timings after the results. Default: True."""

    model_config = SettingsConfigDict(
        env_prefix="LETTERBOXED_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
