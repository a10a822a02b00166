# checkboard/api/dependencies.py
from checkboard.core.config import Settings, settings


def get_settings() -> Settings:
    """Settings dependency, overridable in tests"""
    return settings
