"""Translation pipeline for generated asset modules.

This module provides the main interface for turning input directories
into a Python module. Discovery is shared by all writers; rendering is
delegated to the writer the configuration selects.
"""

import io
import os

from .core.types import Asset, Config
from .core.validator import validate_config
from .registry import WriterRegistry
from .safefile import safe_write_file
from .scanner import compile_ignore_patterns, find_files, to_slash
from .writers.base import AssetWriter
from .writers.toc import write_restore, write_toc, write_toc_tree

GENERATED_HEADER = "# Code generated by asset-bindata. DO NOT EDIT.\n"


def find_assets(config: Config) -> list[Asset]:
    """Locate all assets of every configured input.

    Inputs are walked in order and share identifier counters and visited
    paths, so identifiers are unique across the whole catalog.

    Args:
        config: The translation configuration

    Returns:
        Discovered assets in catalog order

    Raises:
        OSError: If a path cannot be stat'ed, listed or resolved
        InvalidFileError: If a file's logical name is empty
        re.error: If an ignore pattern is invalid
    """
    toc: list[Asset] = []
    ignore = compile_ignore_patterns(config.ignore)
    known_funcs: dict[str, int] = {}
    visited_paths: set[str] = set()

    for input_config in config.input:
        find_files(
            input_config.path,
            config.prefix,
            input_config.recursive,
            toc,
            ignore,
            known_funcs,
            visited_paths,
        )

    return toc


def _source_path(path: str, cwd: str) -> str:
    try:
        relative = os.path.relpath(path, cwd)
    except ValueError:
        # Different drive on Windows
        relative = path
    # Line breaks would end the header comment; undecodable bytes
    # (surrogate escapes) cannot be encoded as UTF-8
    relative = to_slash(relative).encode("utf-8", "backslashreplace").decode("utf-8")
    return relative.replace("\r", "\\r").replace("\n", "\\n")


class BindataPipeline:
    """Main interface for module generation.

    Example:
        >>> config = Config(input=[InputConfig('assets', recursive=True)])
        >>> pipeline = BindataPipeline(config)
        >>> toc = pipeline.translate()
    """

    def __init__(self, config: Config):
        """Initialize the pipeline.

        Args:
            config: The translation configuration
        """
        self.config = config
        self.writer: AssetWriter = WriterRegistry.create_writer(
            config.writer_name, compress=not config.no_compress
        )

    def find_assets(self) -> list[Asset]:
        """Locate all assets of the configured inputs."""
        return find_assets(self.config)

    def render(self, toc: list[Asset]) -> str:
        """Render the catalog into the source of a Python module.

        Args:
            toc: Discovered assets, in catalog order

        Returns:
            Source code of the generated module

        Raises:
            OSError: If an asset's file cannot be read
            ValueError: If the catalog cannot be arranged into a tree
            SyntaxError: If the generated source does not compile
        """
        buf = io.StringIO()

        # The header makes e.g. GitHub collapse diffs of generated files
        buf.write(GENERATED_HEADER)
        buf.write("# sources:\n")
        cwd = os.getcwd()
        for asset in toc:
            buf.write(f"# {_source_path(asset.path, cwd)}\n")
        buf.write("\n")

        self.writer.write(buf, self.config, toc)
        write_toc(buf, toc)
        write_toc_tree(buf, toc)
        write_restore(buf)

        source = buf.getvalue()
        compile(source, self.config.output or "<bindata>", "exec")
        return source

    def write(self, toc: list[Asset]) -> str:
        """Render the catalog and atomically replace the configured output.

        Returns:
            Source code that was written

        Raises:
            OSError: If an asset cannot be read or the output cannot be written
            ValueError: If the catalog cannot be arranged into a tree
        """
        source = self.render(toc)
        safe_write_file(self.config.output, source.encode("utf-8"))
        return source

    def translate(self) -> list[Asset]:
        """Validate the configuration, discover assets and write the module.

        Returns:
            The catalog that was written

        Raises:
            ValidationError: If the configuration doesn't conform to the schema
            ConfigError: If the configuration cannot be used
            OSError: If discovery or writing fails
        """
        validate_config(self.config)
        toc = self.find_assets()
        self.write(toc)
        return toc


def translate(config: Config) -> list[Asset]:
    """Generate the module described by config. See BindataPipeline.translate."""
    return BindataPipeline(config).translate()
