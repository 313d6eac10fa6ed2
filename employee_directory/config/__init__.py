from .config import DirectoryConfig

__all__ = [
    "DirectoryConfig",
]
