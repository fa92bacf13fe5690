"""OAuth collaborator seam: anything that can hand over an access token."""
from .providers import TokenProvider, StaticTokenProvider, EnvTokenProvider

__all__ = ['TokenProvider', 'StaticTokenProvider', 'EnvTokenProvider']
