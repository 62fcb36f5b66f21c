"""
Config package for leader_lexis.

Responsible for:
- config models (GlobalConfig, CountryGroup, DataConfig)
- config I/O helpers (load_global_config / resolve_data_path)
"""

from .model import CountryGroup, DataConfig, GlobalConfig
from .loader import load_global_config, resolve_data_path

__all__ = ["CountryGroup", "DataConfig", "GlobalConfig", "load_global_config", "resolve_data_path"]
