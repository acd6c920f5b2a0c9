"""
Bluff - Application Settings

Loads configuration from environment variables using Pydantic Settings, and
applies the process-wide pieces of it (logging, random seed) once at startup.
"""

import logging
import random
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from bluff.engine.base import DICE_PER_PLAYER, GameConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Chat bot
    bot_username: str = "bluffbot"
    join_link: str = "https://telegram.me/{username}?start={session_id}"

    # Rules
    dice_per_player: int = Field(default=DICE_PER_PLAYER, ge=1)
    min_players: int = Field(default=2, ge=2)

    # Bid suggestion keyboard
    keyboard_rows: int = Field(default=4, ge=1)
    keyboard_columns: int = Field(default=4, ge=1)

    # Application
    rng_seed: int | None = None
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "BLUFF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_config(self) -> GameConfig:
        """Rules configuration for new games."""
        return GameConfig(
            dice_per_player=self.dice_per_player,
            min_players=self.min_players,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set up root logging from settings. DEBUG wins over log_level."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def seed_random(settings: Settings) -> None:
    """Seed the process-wide random source used for dice rolls."""
    random.seed(settings.rng_seed)
