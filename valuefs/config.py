"""Configuration for valuefs stores."""

from dataclasses import dataclass


@dataclass
class FsConfig:
    """Configuration for a store and the helpers wrapping it."""
    initial_dir: str = '/'  # Working directory of a freshly created store
    encoding: str = 'utf-8'  # Codec used by the string read/write helpers
