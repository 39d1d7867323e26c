"""Writers for rendering discovered assets into Python source.

Each writer auto-registers itself with the WriterRegistry when this
package is imported.
"""

from .base import AssetWriter
from .debug import DebugWriter
from .release import ReleaseWriter
from .toc import build_tree, write_restore, write_toc, write_toc_tree

# Auto-register with the registry
from ..registry import WriterRegistry


def _create_release_writer(compress: bool = True, **kwargs) -> ReleaseWriter:
    """Factory function for the embedding writer.

    Args:
        compress: Whether to gzip embedded contents
        **kwargs: Additional parameters (unused)
    """
    return ReleaseWriter(compress=compress)


def _create_debug_writer(**kwargs) -> DebugWriter:
    return DebugWriter(dev=False)


def _create_dev_writer(**kwargs) -> DebugWriter:
    return DebugWriter(dev=True)


# Auto-register at module import
WriterRegistry.register_factory('release', _create_release_writer)
WriterRegistry.register_factory('debug', _create_debug_writer)
WriterRegistry.register_factory('dev', _create_dev_writer)

__all__ = [
    "AssetWriter",
    "DebugWriter",
    "ReleaseWriter",
    "build_tree",
    "write_restore",
    "write_toc",
    "write_toc_tree",
]
