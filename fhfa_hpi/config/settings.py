"""Settings configuration for FHFA HPI loading and lookups."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
import json
import logging

from .constants import GEO_LEVELS, DEFAULT_PREFERENCE_ORDER, DEFAULT_REQUEST_TIMEOUT
from ..utils.exceptions import ConfigurationError


@dataclass
class Settings:
    """Configuration settings for FHFA HPI processing."""
    
    # Data paths
    data_dir: Optional[str] = None  # local copies named as in FILE_NAMES
    cache_dir: Optional[str] = None  # downloads are kept here when set
    
    # Network
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    
    # Best-match cascade
    preference_order: List[str] = field(
        default_factory=lambda: list(DEFAULT_PREFERENCE_ORDER)
    )
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    @classmethod
    def from_json(cls, json_path: str) -> "Settings":
        """Load settings from JSON file."""
        with open(json_path, 'r') as f:
            config = json.load(f)
        return cls(**config)
    
    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        return cls(**config_dict)
    
    def to_json(self, json_path: str) -> None:
        """Save settings to JSON file."""
        config_dict = {
            k: v for k, v in self.__dict__.items() 
            if v is not None
        }
        with open(json_path, 'w') as f:
            json.dump(config_dict, f, indent=2)
    
    def validate(self) -> None:
        """Validate settings consistency."""
        if self.request_timeout <= 0:
            raise ConfigurationError("Request timeout must be positive")
        
        if not self.preference_order:
            raise ConfigurationError("Preference order cannot be empty")
        
        invalid_levels = set(self.preference_order) - set(GEO_LEVELS)
        if invalid_levels:
            raise ConfigurationError(
                f"Invalid geo levels in preference order: {sorted(invalid_levels)}. "
                f"Valid options are: {GEO_LEVELS}"
            )
        
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")


def get_default_settings() -> Settings:
    """Get default settings instance."""
    return Settings()
