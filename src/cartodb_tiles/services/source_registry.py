import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, List
from urllib.parse import urlsplit

from cartodb_tiles.interfaces.protocol_handler import ITileSource, ITileSourceLoader, ProtocolHandler
from cartodb_tiles.models.tile_server import TileServer
from cartodb_tiles.exceptions.cartodb_exceptions import CartoDBTilesException, UnsupportedSchemeError

HandlerFactory = Callable[[ITileSourceLoader], ProtocolHandler]

TEMPLATE_SCHEMES = ('http', 'https')


class TileSourceRegistry(ITileSourceLoader):
    """Host registry mapping URI schemes to protocol handler factories"""
    
    def __init__(self):
        self.protocols: Dict[str, HandlerFactory] = {}
        self.logger = logging.getLogger('TileSourceRegistry')
    
    def register(self, scheme: str, factory: HandlerFactory) -> None:
        """Register a handler factory for a scheme (without the trailing ':')"""
        scheme = scheme.rstrip(':').lower()
        if scheme in TEMPLATE_SCHEMES:
            raise ValueError(f"Scheme '{scheme}' is reserved for URL templates")
        self.protocols[scheme] = factory
    
    def list_protocols(self) -> List[str]:
        """List all registered schemes"""
        return sorted(self.protocols.keys())
    
    def load(self, uri: str) -> ITileSource:
        """Load a tile source from a URL template or a registered connection string"""
        scheme, sep, _ = uri.partition(':')
        scheme = scheme.lower() if sep else ''
        
        if scheme in TEMPLATE_SCHEMES:
            return self._create_http_source(uri)
        
        factory = self.protocols.get(scheme)
        if factory is None:
            raise UnsupportedSchemeError(scheme)
        
        return factory(self).resolve(uri)
    
    def load_many(self, uris: List[str], max_workers: int = 4) -> Dict[str, Any]:
        """Load several sources in parallel; each resolution is independent"""
        results = {
            'total': len(uris),
            'sources': {},
            'errors': {}
        }
        
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
            futures = {executor.submit(self.load, uri): uri for uri in uris}
            
            for future in as_completed(futures):
                uri = futures[future]
                try:
                    results['sources'][uri] = future.result()
                except CartoDBTilesException as e:
                    self.logger.warning(f"Failed to load {redact_uri(uri)}: {e}")
                    results['errors'][uri] = e
        
        return results
    
    @staticmethod
    def _create_http_source(url: str) -> TileServer:
        """Create a generic XYZ source for a URL template"""
        return TileServer(name=urlsplit(url).netloc, url=url)


def redact_uri(uri: str) -> str:
    """Connection string with its API key masked, for logs and output"""
    try:
        parts = urlsplit(uri)
    except ValueError:
        head, sep, tail = uri.rpartition('@')
        return f"{head.partition(':')[0]}:***@{tail}" if sep else uri
    if '@' not in parts.netloc:
        return uri
    userinfo, _, host = parts.netloc.rpartition('@')
    username = userinfo.partition(':')[0]
    return parts._replace(netloc=f"{username}:***@{host}").geturl()
