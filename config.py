import logging
import os
from typing import Final

DEFAULT_API_URL = "https://restcountries.com/v3.1"


class Config:

    def __init__(self):
        """ Read constants from environment variables """
        self.HOST: Final = Config.get_env_value("HOST")
        self.PORT: Final = int(Config.get_env_value("PORT"))

        self.API_URL: Final = Config.get_env_value("COUNTRIES_API_URL", DEFAULT_API_URL).rstrip("/")
        self.REQUEST_TIMEOUT: Final = float(Config.get_env_value("REQUEST_TIMEOUT", "10"))
        self.SUGGESTION_LIMIT: Final = int(Config.get_env_value("SUGGESTION_LIMIT", "0"))
        if self.SUGGESTION_LIMIT < 0:
            raise ValueError("SUGGESTION_LIMIT must not be negative: " + str(self.SUGGESTION_LIMIT))

        self.LOG_LEVEL: Final = Config.get_env_value("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError("Log level not supported: " + self.LOG_LEVEL)

    @staticmethod
    def get_env_value(key, default=None):
        value = os.getenv(key, default)
        if value is None:
            raise ValueError(f"{key} environment variable is not set.")
        return value
