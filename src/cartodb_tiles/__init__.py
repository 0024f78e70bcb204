"""Resolve CartoDB named maps into tile URL templates"""

from cartodb_tiles.core.cartodb_source import CartoDBSource, create_registry, register_protocols
from cartodb_tiles.services.source_registry import TileSourceRegistry
from cartodb_tiles.utils.url_template import build_template

__version__ = '1.0.0'

__all__ = ['CartoDBSource', 'TileSourceRegistry', 'build_template',
           'create_registry', 'register_protocols']
