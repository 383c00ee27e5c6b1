"""
Utility modules for the catalog API
"""
from .config_loader import StoreConfig, load_store_config

__all__ = [
    'StoreConfig',
    'load_store_config',
]
