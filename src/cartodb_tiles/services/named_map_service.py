import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from cartodb_tiles.models.connection import DEFAULT_HOSTNAME, InstantiationResult
from cartodb_tiles.services.request_service import RequestService
from cartodb_tiles.exceptions.cartodb_exceptions import (
    ConfigLoadError, RemoteRejectedError, UnexpectedResponseError
)

# The Maps API answers an update of a named map that does not exist with 400
# rather than 404. sync_map depends on this to decide when to create.
NOT_FOUND_STATUS = 400


class NamedMapService:
    """Named map calls for one account on one Maps API host"""
    
    def __init__(self, username: str, api_key: str, hostname: str = DEFAULT_HOSTNAME,
                 request_service: Optional[RequestService] = None):
        self.username = username
        self.api_key = api_key
        self.hostname = hostname
        self.request_service = request_service or RequestService()
        self.logger = logging.getLogger('NamedMapService')
    
    @property
    def base_url(self) -> str:
        return f"https://{self.username}.{self.hostname}/api/v1/map/named"
    
    def _map_url(self, map_name: str) -> str:
        return f"{self.base_url}/{quote(map_name, safe='')}"
    
    def _auth(self) -> Dict[str, str]:
        return {'api_key': self.api_key}
    
    def create_map(self, config: Dict[str, Any]) -> Tuple[int, Any]:
        """Create a named map from its full configuration"""
        return self.request_service.execute('POST', self.base_url, self._auth(), config)
    
    def update_map(self, config: Dict[str, Any]) -> Tuple[int, Any]:
        """Replace the named map called config['name']"""
        return self.request_service.execute('PUT', self._map_url(self._map_name(config)),
                                            self._auth(), config)
    
    def sync_map(self, config: Dict[str, Any]) -> Tuple[int, Any]:
        """Make the remote named map match config, creating it if needed"""
        map_name = self._map_name(config)
        try:
            return self.update_map(config)
        except RemoteRejectedError as e:
            if e.status_code != NOT_FOUND_STATUS:
                raise
            self.logger.info(f"Named map '{map_name}' does not exist yet, creating it")
        return self.create_map(config)
    
    def instantiate(self, map_name: str) -> InstantiationResult:
        """Instantiate a named map and return its layer group"""
        status_code, body = self.request_service.execute(
            'POST', self._map_url(map_name), self._auth(), {}
        )
        
        layergroup_id = body.get('layergroupid') if isinstance(body, dict) else None
        if not layergroup_id:
            raise UnexpectedResponseError(status_code, body)
        
        return InstantiationResult(layergroup_id=str(layergroup_id), status_code=status_code)
    
    @staticmethod
    def _map_name(config: Dict[str, Any]) -> str:
        name = config.get('name') if isinstance(config, dict) else None
        if not isinstance(name, str) or not name:
            raise ConfigLoadError("Named map configuration has no 'name'")
        return name
