"""Debug and dev writers: generated code reads assets from disk.

In debug mode the generated functions open each file by its absolute
path. In dev mode the path is built from the module-level ``root_dir``
and the asset name, so the module keeps working when the tree moves.
"""

from typing import TextIO

from ..core.types import Asset, Config
from .base import AssetWriter

DISK_READER = '''

def _bindata_read(path, name):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise OSError(f"Error reading asset {name} at {path}: {e}") from e
'''

ROOT_DIR = '''

# Directory asset names are resolved against, reassign to relocate
root_dir = os.path.dirname(os.path.abspath(__file__))
'''


class DebugWriter(AssetWriter):
    """Writer that references assets on disk instead of embedding them."""

    imports = ("os", "stat")

    def __init__(self, dev: bool = False):
        self.dev = dev

    def write_header(self, buf: TextIO, config: Config) -> None:
        buf.write(DISK_READER)
        if self.dev:
            buf.write(ROOT_DIR)

    def path_expression(self, asset: Asset) -> str:
        """Return the Python expression locating asset at runtime."""
        if self.dev:
            return f"os.path.join(root_dir, {asset.name!r})"
        return repr(asset.path)

    def write_asset(self, buf: TextIO, config: Config, asset: Asset) -> None:
        path = self.path_expression(asset)
        buf.write(
            f"\n\ndef {asset.func}Bytes():\n"
            f"    return _bindata_read({path}, {asset.name!r})\n"
            f"\n\ndef {asset.func}Asset():\n"
            f"    path = {path}\n"
            f"    name = {asset.name!r}\n"
            f"    data = _bindata_read(path, name)\n"
            f"    fi = os.stat(path)\n"
            f"    info = BindataFileInfo(name=name, size=fi.st_size, "
            f"mode=stat.S_IMODE(fi.st_mode), mod_time=int(fi.st_mtime))\n"
            f"    return Asset(data, info)\n"
        )
