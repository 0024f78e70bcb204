import json
import os
from typing import Dict, Any, Optional

from cartodb_tiles.interfaces.protocol_handler import IConfigLoader
from cartodb_tiles.models.connection import DEFAULT_HOSTNAME
from cartodb_tiles.models.settings import Settings
from cartodb_tiles.exceptions.cartodb_exceptions import (
    ConfigLoadError, ConfigurationError, ValidationError
)

CONFIG_PATH_ENV = 'CARTODB_TILES_CONFIG'
USERNAME_ENV = 'CARTODB_USERNAME'
API_KEY_ENV = 'CARTODB_API_KEY'
HOSTNAME_ENV = 'CARTODB_HOSTNAME'


class ConfigService(IConfigLoader):
    """Service for loading settings and named map configurations"""
    
    def load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load settings from a JSON file, or return {} when none is configured"""
        config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        if not config_path:
            return {}
        
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Config file {config_path} not found!")
        
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading config: {e}")
        
        try:
            self.validate_config(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}")
        
        return config
    
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate settings structure"""
        if not isinstance(config, dict):
            raise ValidationError("configuration must be a JSON object")
        
        for key in ('username', 'api_key', 'hostname'):
            if key in config and not isinstance(config[key], str):
                raise ValidationError(f"{key} must be a string")
        
        timeout = config.get('timeout', 30)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValidationError("timeout must be a positive number")
        
        if not isinstance(config.get('enable_file_configs', True), bool):
            raise ValidationError("enable_file_configs must be a boolean")
        
        if not isinstance(config.get('logging', {}), dict):
            raise ValidationError("logging must be a dictionary")
        
        return True
    
    def load_settings(self, config_path: Optional[str] = None) -> Settings:
        """Build settings; environment variables win over the config file"""
        config = self.load_config(config_path)
        
        return Settings(
            username=os.environ.get(USERNAME_ENV) or config.get('username', ''),
            api_key=os.environ.get(API_KEY_ENV) or config.get('api_key', ''),
            hostname=(os.environ.get(HOSTNAME_ENV) or config.get('hostname')
                      or DEFAULT_HOSTNAME),
            timeout=config.get('timeout', 30),
            enable_file_configs=config.get('enable_file_configs', True),
            logging=config.get('logging', {})
        )
    
    def load_map_config(self, config_path: str) -> Dict[str, Any]:
        """Load a named map configuration document"""
        if not os.path.isfile(config_path):
            raise ConfigLoadError(f"Map config {config_path} not found!")
        
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                map_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Invalid JSON in {config_path}: {e}")
        except OSError as e:
            raise ConfigLoadError(f"Error loading map config {config_path}: {e}")
        
        name = map_config.get('name') if isinstance(map_config, dict) else None
        if not isinstance(name, str) or not name:
            raise ConfigLoadError(f"Map config {config_path} has no 'name'")
        
        return map_config
