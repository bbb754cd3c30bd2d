"""Format profile loading."""

from yamlemit.parser.loader import ProfileError, ProfileLoader

__all__ = [
    "ProfileError",
    "ProfileLoader",
]
