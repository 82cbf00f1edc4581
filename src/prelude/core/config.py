import os
import typing as tp
from pydantic import BaseModel, Field

LogLevel = tp.Literal[
    "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "FATAL", "CRITICAL"
]


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        min_length=1,
    )

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        level = os.getenv("PRELUDE_LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level.upper()
        else:
            # LOG_LEVEL is shared with other tools; ignore values we can't use
            shared_level = (os.getenv("LOG_LEVEL") or "").upper()
            if shared_level in tp.get_args(LogLevel):
                values["LOG_LEVEL"] = shared_level

        log_format = os.getenv("PRELUDE_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
