"""FanWiki — wikitext rendering engine for a fan-wiki platform."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("fanwiki")
except PackageNotFoundError:
    # imported from a source tree that was never installed
    __version__ = "0.0.0+local"

__all__ = ["__version__"]
