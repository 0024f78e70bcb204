from dataclasses import dataclass

from cartodb_tiles.interfaces.protocol_handler import ITileSource


@dataclass
class TileServer(ITileSource):
    """Generic XYZ tile source built from a URL template"""
    name: str
    url: str
    tile_type: str = 'raster'  # 'raster' or 'vector'
    
    def get_tile_url(self, zoom: int, x: int, y: int) -> str:
        """Generate tile URL for given coordinates"""
        return self.url.format(z=zoom, x=x, y=y)
    
    def get_tile_type(self) -> str:
        """Get tile type"""
        return self.tile_type
    
    def get_name(self) -> str:
        """Get server name"""
        return self.name
    
    def get_url_template(self) -> str:
        """Get URL template"""
        return self.url
