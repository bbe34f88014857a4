"""
Utility modules for the vendor marketplace
"""
from .config_loader import MarketplaceConfig, load_marketplace_config

__all__ = [
    'MarketplaceConfig',
    'load_marketplace_config',
]
