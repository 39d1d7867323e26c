"""Basic module generation example.

This example demonstrates how to:
- Discover the files of a directory tree
- Write a module that embeds them
- Load an asset back from the generated module
"""

import importlib.util
import sys
from pathlib import Path

from asset_bindata import BindataPipeline, Config, InputConfig


def main():
    # Directory to embed (change this to your asset directory)
    asset_dir = Path.home() / "Documents" / "GameAssets"

    if not asset_dir.exists():
        print(f"Directory not found: {asset_dir}", file=sys.stderr)
        print(f"Please update the asset_dir variable in this script", file=sys.stderr)
        return

    config = Config(
        input=[InputConfig(path=str(asset_dir), recursive=True)],
        output="bindata.py",
        prefix=str(asset_dir),
        ignore=[r"/\.", r"~$"],
    )

    print(f"Scanning directory: {asset_dir}", file=sys.stderr)
    toc = BindataPipeline(config).translate()

    # Display summary
    print(f"\n✓ Module generated successfully", file=sys.stderr)
    print(f"  Output: {config.output}", file=sys.stderr)
    print(f"  Files: {len(toc)}", file=sys.stderr)

    if not toc:
        return

    # Load the generated module and read the first asset back
    spec = importlib.util.spec_from_file_location("bindata", config.output)
    bindata = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(bindata)

    first = toc[0]
    info = bindata.asset_info(first.name)
    print(f"\n  {first.name} -> {first.func}Asset() ({info.size} bytes)", file=sys.stderr)


if __name__ == '__main__':
    main()
