# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000


class Config:
    """Application configuration."""

    # Listener settings
    HOST: str = os.getenv("HOST", DEFAULT_HOST)
    PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))
    STARTUP_TIMEOUT: float = float(
        os.getenv("STARTUP_TIMEOUT", "5.0")
    )  # seconds to wait for uvicorn to report started


config = Config()


@dataclass(frozen=True)
class ServerConfig:
    """Address the server listens on. Fixed for the lifetime of the process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be in [0, 65535], got {self.port}")

    @classmethod
    def from_config(
        cls,
        cfg: Config = config,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ) -> "ServerConfig":
        """Build from env-driven settings; explicit arguments take precedence."""
        return cls(
            host=cfg.HOST if host is None else host,
            port=cfg.PORT if port is None else port,
        )
