"""Writer registry for factory-based writer creation.

This module provides a central registry for writer factories, so the
pipeline can select how assets are emitted by name ('release', 'debug',
'dev') without knowing the writer classes.
"""

import importlib
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .writers.base import AssetWriter


class WriterRegistry:
    """Central registry for writer factories.

    Writer modules register themselves when the writers package is
    imported; ``discover_writers`` performs that import.
    """

    _factories: dict[str, Callable[..., "AssetWriter"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "AssetWriter"]) -> None:
        """Register a factory function for creating writers.

        Args:
            name: Name of the writer (e.g., 'release', 'debug')
            factory: Callable that creates an AssetWriter instance

        Example:
            >>> WriterRegistry.register_factory('debug', lambda **kwargs: DebugWriter())
        """
        cls._factories[name] = factory

    @classmethod
    def create_writer(cls, writer_name: str, **kwargs) -> "AssetWriter":
        """Create a writer from a registered factory.

        Args:
            writer_name: Name of the registered writer
            **kwargs: Arguments passed to the writer factory

        Returns:
            The configured AssetWriter

        Raises:
            ValueError: If writer_name is not registered
        """
        if writer_name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown writer: '{writer_name}'. Available writers: {available}"
            )

        return cls._factories[writer_name](**kwargs)

    @classmethod
    def list_writers(cls) -> list[str]:
        """List all registered writer names.

        Example:
            >>> WriterRegistry.list_writers()
            ['release', 'debug', 'dev']
        """
        return list(cls._factories.keys())

    @classmethod
    def discover_writers(cls) -> None:
        """Import the built-in writers so they register themselves."""
        importlib.import_module('.writers', package='asset_bindata')
