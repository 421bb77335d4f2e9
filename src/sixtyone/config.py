from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
)


class Config(BaseSettings):
    """Command-line configuration parameters.

    Automatically read modifications to the configuration parameters
    from ``SIXTYONE_*`` environment variables and ``.env.local`` file.
    The rules of the game are constants and never read from here.

    Attributes:
        log_level:
            Minimum level written to stderr.
        log_file:
            Optional file receiving a copy of every log record.
        seed_prefix:
            Prefix of the generated seeds used by ``simulate``.
        sim_count:
            Number of hands ``simulate`` plays by default.
        human_seat:
            Seat controlled from the keyboard in ``play``.
    """

    log_level: str = "INFO"
    log_file: Path | None = None
    seed_prefix: str = "demo-"
    sim_count: int = Field(default=5, ge=0)
    human_seat: int = Field(default=0, ge=0, le=5)

    model_config = SettingsConfigDict(
        env_prefix="SIXTYONE_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )


config = Config()  # type: ignore[call-arg]
