from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote

DEFAULT_HOSTNAME = 'cartodb.com'


class ConnectionMode(Enum):
    """How a connection string names its map"""
    BY_NAME = 'cartodb'
    BY_CONFIG = 'cartodb+file'

    @property
    def scheme(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Data model for one parsed connection string"""
    username: str
    api_key: str
    mode: ConnectionMode = ConnectionMode.BY_NAME
    hostname: Optional[str] = None  # settings hostname when unset
    scale: int = 1
    map_name: Optional[str] = None  # BY_NAME only
    config_path: Optional[str] = None  # BY_CONFIG only

    def to_connection_string(self) -> str:
        """Render as a cartodb:// connection string for a by-name lookup"""
        return (f"cartodb://{quote(self.username, safe='')}:{quote(self.api_key, safe='')}"
                f"@{self.hostname}/{quote(self.map_name, safe='')}?scale={self.scale}")

    def __repr__(self) -> str:
        # keep API keys out of logs and tracebacks
        return (f"ConnectionDescriptor(username={self.username!r}, api_key='***', "
                f"mode={self.mode.name}, hostname={self.hostname!r}, scale={self.scale}, "
                f"map_name={self.map_name!r}, config_path={self.config_path!r})")


@dataclass(frozen=True)
class InstantiationResult:
    """Layer group handed back by a named map instantiation"""
    layergroup_id: str
    status_code: int
