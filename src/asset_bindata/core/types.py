"""Type definitions for asset discovery and code generation.

This module defines the dataclasses shared by the scanner, the pipeline
and the writers: discovered assets and the translation configuration.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Asset:
    """A single discovered file."""

    path: str  # Absolute, OS-native path to the source file
    name: str  # Slash-normalized logical name, never starts with '/'
    func: str  # Identifier unique across the catalog


@dataclass
class InputConfig:
    """One input root and whether to descend into its subdirectories."""

    path: str
    recursive: bool = False


@dataclass
class Config:
    """Settings for a single translation run.

    Attributes:
        input: Input roots, processed in order
        output: Path of the generated module (defaulted during validation)
        prefix: Path prefix stripped from asset names
        ignore: Regular expressions; matching paths are skipped
        debug: Reference files by absolute path instead of embedding them
        dev: Reference files relative to the module's ``root_dir``
        no_compress: Embed raw bytes instead of gzip data
        no_metadata: Record zero size, mode and modification time
        mode: File mode override for embedded metadata (0 keeps the real mode)
        mod_time: Modification time override in seconds (0 keeps the real one)
    """

    input: list[InputConfig] = field(default_factory=list)
    output: str = ""
    prefix: str = ""
    ignore: list[str] = field(default_factory=list)
    debug: bool = False
    dev: bool = False
    no_compress: bool = False
    no_metadata: bool = False
    mode: int = 0
    mod_time: int = 0

    @property
    def writer_name(self) -> str:
        """Name of the registered writer this configuration selects."""
        if self.dev:
            return "dev"
        if self.debug:
            return "debug"
        return "release"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
