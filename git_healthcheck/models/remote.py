"""Remote model and transport enum"""
from enum import Enum
from dataclasses import dataclass


class Transport(Enum):
    """How git reaches a remote."""
    SSH = "SSH"
    HTTPS = "HTTPS"
    UNKNOWN = "Unknown"


@dataclass
class Remote:
    """A configured remote."""
    name: str
    url: str
    host: str
    transport: Transport

    def __str__(self) -> str:
        return f"{self.name} ({self.host}, {self.transport.value})"
