from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union


class ITileSource(ABC):
    """Interface for anything a loader hands back to its caller"""
    
    @abstractmethod
    def get_name(self) -> str:
        """Get source name"""
        pass
    
    @abstractmethod
    def get_tile_url(self, zoom: int, x: int, y: int) -> str:
        """Generate tile URL for given coordinates"""
        pass
    
    @abstractmethod
    def get_tile_type(self) -> str:
        """Get tile type (raster/vector)"""
        pass
    
    @abstractmethod
    def get_url_template(self) -> str:
        """Get the {z}/{x}/{y} URL template"""
        pass


class ITileSourceLoader(ABC):
    """Interface for the host that turns URIs into tile sources"""
    
    @abstractmethod
    def load(self, uri: str) -> ITileSource:
        """Resolve a URI (connection string or URL template) into a tile source"""
        pass


class ProtocolHandler(ABC):
    """Interface for handlers registered against a URI scheme"""
    
    @abstractmethod
    def resolve(self, descriptor: Union[str, Any]) -> ITileSource:
        """Resolve a connection string or descriptor into a tile source"""
        pass


class IConfigLoader(ABC):
    """Interface for configuration loading"""
    
    @abstractmethod
    def load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load settings from file"""
        pass
    
    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate settings"""
        pass
    
    @abstractmethod
    def load_map_config(self, config_path: str) -> Dict[str, Any]:
        """Load a named map configuration document"""
        pass
