from .settings import GusSettings, get_settings

__all__ = ["GusSettings", "get_settings"]
