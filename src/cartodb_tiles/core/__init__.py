from .cartodb_source import CartoDBSource, create_registry, register_protocols
from .connection_parser import parse_connection

__all__ = ['CartoDBSource', 'create_registry', 'parse_connection', 'register_protocols']
