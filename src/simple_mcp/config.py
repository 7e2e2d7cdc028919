"""Server configuration: identity and protocol defaults."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerConfig(BaseModel):
    """Static settings for one server process.

    Built in code (or from CLI flags); no environment variables or files
    are read.
    """

    name: str = "simple-mcp-server"
    version: str = "0.1.0"
    default_protocol_version: str = "2025-03-08"
    log_level: LogLevel = "WARNING"
