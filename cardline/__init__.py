# __init__.py

from .config import DisplayConfig
from .logger import Logger
from .interface import Interface

__all__ = ["Interface", "Logger", "DisplayConfig"]
