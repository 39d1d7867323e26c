"""Release writer: embeds file contents in the generated module."""

import gzip
import os
import stat
from typing import TextIO

from ..core.types import Asset, Config
from .base import AssetWriter

# Bytes per line of an embedded bytes literal
BYTES_PER_LINE = 32

COMPRESSED_READER = '''

def _bindata_read(data, name):
    try:
        return gzip.decompress(data)
    except (OSError, EOFError) as e:
        raise OSError(f"Read {name}: {e}") from e
'''

UNCOMPRESSED_READER = '''

def _bindata_read(data, name):
    return data
'''


def write_bytes_literal(buf: TextIO, var: str, data: bytes) -> None:
    """Write ``var = b"..."`` split over lines of BYTES_PER_LINE bytes."""
    if not data:
        buf.write(f'{var} = b""\n')
        return

    buf.write(f"{var} = (\n")
    for start in range(0, len(data), BYTES_PER_LINE):
        buf.write(f"    {data[start:start + BYTES_PER_LINE]!r}\n")
    buf.write(")\n")


class ReleaseWriter(AssetWriter):
    """Writer that embeds asset contents, gzip-compressed by default."""

    def __init__(self, compress: bool = True):
        self.compress = compress
        self.imports = ("gzip", "os") if compress else ("os",)

    def write_header(self, buf: TextIO, config: Config) -> None:
        buf.write(COMPRESSED_READER if self.compress else UNCOMPRESSED_READER)

    def write_asset(self, buf: TextIO, config: Config, asset: Asset) -> None:
        with open(asset.path, "rb") as f:
            data = f.read()

        if self.compress:
            # Fixed mtime keeps the output identical between runs
            data = gzip.compress(data, mtime=0)

        size, mode, mod_time = self._file_info(config, asset)

        buf.write("\n\n")
        write_bytes_literal(buf, f"_{asset.func}_data", data)
        buf.write(
            f"\n\ndef {asset.func}Bytes():\n"
            f"    return _bindata_read(_{asset.func}_data, {asset.name!r})\n"
            f"\n\ndef {asset.func}Asset():\n"
            f"    data = {asset.func}Bytes()\n"
            f"    info = BindataFileInfo(name={asset.name!r}, size={size}, "
            f"mode={mode:#o}, mod_time={mod_time})\n"
            f"    return Asset(data, info)\n"
        )

    @staticmethod
    def _file_info(config: Config, asset: Asset) -> tuple[int, int, int]:
        stat_info = os.stat(asset.path)
        size = stat_info.st_size
        mode = stat.S_IMODE(stat_info.st_mode)
        mod_time = int(stat_info.st_mtime)

        if config.no_metadata:
            size = mode = mod_time = 0

        # Overrides apply even without metadata
        if config.mode > 0:
            mode = config.mode & 0o777
        if config.mod_time > 0:
            mod_time = config.mod_time

        return size, mode, mod_time
