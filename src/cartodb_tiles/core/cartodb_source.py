import logging
from dataclasses import replace
from functools import partial
from typing import Optional, Union

from cartodb_tiles.interfaces.protocol_handler import ITileSource, ITileSourceLoader, ProtocolHandler
from cartodb_tiles.models.connection import ConnectionDescriptor, ConnectionMode
from cartodb_tiles.models.settings import Settings
from cartodb_tiles.core.connection_parser import parse_connection
from cartodb_tiles.services.config_service import ConfigService
from cartodb_tiles.services.named_map_service import NamedMapService
from cartodb_tiles.services.request_service import RequestService
from cartodb_tiles.services.source_registry import TileSourceRegistry
from cartodb_tiles.utils.url_template import build_template


class CartoDBSource(ProtocolHandler):
    """Resolves cartodb:// and cartodb+file:// connection strings.

    A by-name connection is instantiated and its tile URL template is handed
    to the loader. A by-config connection first loads the JSON document,
    creates or updates the named map it describes, then hands the loader a
    cartodb:// connection string for that map.
    """
    
    def __init__(self, loader: ITileSourceLoader, settings: Optional[Settings] = None,
                 request_service: Optional[RequestService] = None,
                 config_service: Optional[ConfigService] = None):
        self.loader = loader
        self.config_service = config_service or ConfigService()
        self.settings = settings or self.config_service.load_settings()
        self.request_service = request_service or RequestService(timeout=self.settings.timeout)
        self.logger = logging.getLogger('CartoDBSource')
    
    def resolve(self, descriptor: Union[str, ConnectionDescriptor]) -> ITileSource:
        """Resolve a connection string or descriptor through the loader"""
        descriptor = parse_connection(descriptor, self.settings)
        self.logger.debug(f"Resolving {descriptor!r}")
        
        if descriptor.mode is ConnectionMode.BY_CONFIG:
            return self.loader.load(self.sync_config(descriptor))
        
        return self.loader.load(self.get_url_template(descriptor))
    
    def get_url_template(self, descriptor: ConnectionDescriptor) -> str:
        """Instantiate the named map and build its tile URL template"""
        result = self._named_maps(descriptor).instantiate(descriptor.map_name)
        template = build_template(descriptor.username, descriptor.hostname,
                                  result.layergroup_id, descriptor.scale)
        self.logger.info(f"Named map '{descriptor.map_name}' -> layer group {result.layergroup_id}")
        return template
    
    def sync_config(self, descriptor: ConnectionDescriptor) -> str:
        """Push the config document and return a cartodb:// string for its map"""
        map_config = self.config_service.load_map_config(descriptor.config_path)
        self._named_maps(descriptor).sync_map(map_config)
        
        by_name = replace(descriptor, mode=ConnectionMode.BY_NAME,
                          map_name=map_config['name'], config_path=None)
        return by_name.to_connection_string()
    
    def _named_maps(self, descriptor: ConnectionDescriptor) -> NamedMapService:
        return NamedMapService(descriptor.username, descriptor.api_key,
                               descriptor.hostname, self.request_service)


def register_protocols(registry: TileSourceRegistry, settings: Optional[Settings] = None,
                       request_service: Optional[RequestService] = None) -> None:
    """Register CartoDBSource for its schemes on a host registry"""
    settings = settings or ConfigService().load_settings()
    factory = partial(CartoDBSource, settings=settings, request_service=request_service)
    
    registry.register(ConnectionMode.BY_NAME.scheme, factory)
    if settings.enable_file_configs:
        registry.register(ConnectionMode.BY_CONFIG.scheme, factory)


def create_registry(settings: Optional[Settings] = None,
                    request_service: Optional[RequestService] = None) -> TileSourceRegistry:
    """Registry with the cartodb protocols registered"""
    registry = TileSourceRegistry()
    register_protocols(registry, settings, request_service)
    return registry
