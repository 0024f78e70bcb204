from dataclasses import dataclass, field
from typing import Any, Dict

from cartodb_tiles.models.connection import DEFAULT_HOSTNAME


@dataclass
class Settings:
    """Process-wide defaults applied to every resolution"""
    username: str = ''
    api_key: str = ''
    hostname: str = DEFAULT_HOSTNAME
    timeout: float = 30
    enable_file_configs: bool = True
    logging: Dict[str, Any] = field(default_factory=dict)
