"""Base writer class for rendering a catalog into Python source.

This module defines the base interface for writers that turn the
discovered assets into the per-asset section of a generated module.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ..core.types import Asset, Config


# Definitions every generated module starts with, whatever the writer
COMMON_DEFINITIONS = '''
BindataFileInfo = namedtuple("BindataFileInfo", ["name", "size", "mode", "mod_time"])
Asset = namedtuple("Asset", ["data", "info"])
'''


class AssetWriter(ABC):
    """Abstract base class for asset writers.

    A writer emits the imports and helpers its generated code needs
    (``write_header``) followed by one ``<func>Bytes`` and one
    ``<func>Asset`` function per asset (``write_asset``). The table of
    contents, tree and restore helpers are shared by all writers.
    """

    # Modules imported by the generated code
    imports: tuple[str, ...] = ("os",)

    def write(self, buf: TextIO, config: "Config", toc: list["Asset"]) -> None:
        """Write imports, header and every asset of the catalog.

        Args:
            buf: Destination for the generated source
            config: The translation configuration
            toc: Discovered assets, in catalog order
        """
        for module in sorted(set(self.imports)):
            buf.write(f"import {module}\n")
        buf.write("from collections import namedtuple\n")
        buf.write(COMMON_DEFINITIONS)

        self.write_header(buf, config)
        for asset in toc:
            self.write_asset(buf, config, asset)

    @abstractmethod
    def write_header(self, buf: TextIO, config: "Config") -> None:
        """Write the helpers shared by all assets of this writer.

        Args:
            buf: Destination for the generated source
            config: The translation configuration
        """
        pass

    @abstractmethod
    def write_asset(self, buf: TextIO, config: "Config", asset: "Asset") -> None:
        """Write the loader functions for one asset.

        Args:
            buf: Destination for the generated source
            config: The translation configuration
            asset: The asset to write

        Raises:
            OSError: If the asset's file cannot be read or stat'ed
        """
        pass
