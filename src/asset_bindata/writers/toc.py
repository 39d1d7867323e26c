"""Table of contents, asset tree and restore helpers.

These sections are shared by every writer. They only refer to the
``<func>Asset`` loader functions, so they work unchanged whether the
assets are embedded or read from disk.
"""

from dataclasses import dataclass, field
from typing import TextIO

from ..core.types import Asset

TOC_FUNCTIONS = '''

def asset(name):
    """Load and return the contents of the asset with the given name.

    Raises FileNotFoundError if the asset could not be found.
    """
    return _lookup(name)().data


def asset_info(name):
    """Load and return the file info of the asset with the given name.

    Raises FileNotFoundError if the asset could not be found.
    """
    return _lookup(name)().info


def asset_names():
    """Return the names of all assets."""
    return list(_bindata)


def _lookup(name):
    canonical_name = name.replace("\\\\", "/")
    try:
        return _bindata[canonical_name]
    except KeyError:
        raise FileNotFoundError(f"Asset {name} not found") from None
'''

TREE_FUNCTIONS = '''

class _BinTree:
    def __init__(self, func, children):
        self.func = func
        self.children = children


def asset_dir(name):
    """Return the sorted names of the children of an asset directory.

    For the assets data/img/a.png and data/img/b.png, asset_dir("data")
    returns ["img"] and asset_dir("data/img") returns ["a.png", "b.png"].
    An empty name lists the top level.

    Raises FileNotFoundError if name is not a directory of the tree.
    """
    node = _bintree
    if name:
        canonical_name = name.replace("\\\\", "/")
        for part in canonical_name.split("/"):
            node = node.children.get(part)
            if node is None:
                raise FileNotFoundError(f"Asset {name} not found")
    if node.func is not None:
        raise FileNotFoundError(f"Asset {name} not found")
    return sorted(node.children)
'''

RESTORE_FUNCTIONS = '''

def restore_asset(directory, name):
    """Write the asset with the given name below directory."""
    entry = _lookup(name)()
    path = _file_path(directory, name)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, mode=0o755, exist_ok=True)
    with open(path, "wb") as f:
        f.write(entry.data)
    if entry.info.mode:
        os.chmod(path, entry.info.mode)
    if entry.info.mod_time:
        os.utime(path, (entry.info.mod_time, entry.info.mod_time))


def restore_assets(directory, name):
    """Write the asset or asset directory with the given name below directory."""
    try:
        children = asset_dir(name)
    except FileNotFoundError:
        restore_asset(directory, name)
        return
    for child in children:
        restore_assets(directory, f"{name}/{child}" if name else child)


def _file_path(directory, name):
    canonical_name = name.replace("\\\\", "/")
    return os.path.join(directory, *canonical_name.split("/"))
'''


@dataclass
class TreeNode:
    """Node of the asset tree built from slash-separated asset names."""

    func: str | None = None
    children: dict[str, "TreeNode"] = field(default_factory=dict)


def build_tree(toc: list[Asset]) -> TreeNode:
    """Arrange assets into a tree keyed by the parts of their names.

    Raises:
        ValueError: If a name is used both as a file and as a directory,
            e.g. "x" from one input and "x/y.txt" from another
    """
    root = TreeNode()
    for asset in toc:
        node = root
        parts = asset.name.split("/")
        for depth, part in enumerate(parts):
            if node.func is not None:
                parent = "/".join(parts[:depth])
                raise ValueError(f"Asset {parent} is both a file and a directory")
            node = node.children.setdefault(part, TreeNode())
        if node.children:
            raise ValueError(f"Asset {asset.name} is both a file and a directory")
        node.func = f"{asset.func}Asset"
    return root


def write_toc(buf: TextIO, toc: list[Asset]) -> None:
    """Write the lookup functions and the name -> loader mapping."""
    buf.write(TOC_FUNCTIONS)
    buf.write("\n\n# Maps asset names to the functions that load them\n")
    buf.write("_bindata = {\n")
    for asset in toc:
        buf.write(f"    {asset.name!r}: {asset.func}Asset,\n")
    buf.write("}\n")


def _write_node(buf: TextIO, node: TreeNode, depth: int) -> None:
    func = node.func or "None"
    if not node.children:
        buf.write(f"_BinTree({func}, {{}})")
        return

    indent = "    " * (depth + 1)
    buf.write(f"_BinTree({func}, {{\n")
    for key in sorted(node.children):
        buf.write(f"{indent}{key!r}: ")
        _write_node(buf, node.children[key], depth + 1)
        buf.write(",\n")
    buf.write("    " * depth + "})")


def write_toc_tree(buf: TextIO, toc: list[Asset]) -> None:
    """Write the hierarchical asset tree and ``asset_dir``."""
    buf.write(TREE_FUNCTIONS)
    buf.write("\n\n_bintree = ")
    _write_node(buf, build_tree(toc), 0)
    buf.write("\n")


def write_restore(buf: TextIO) -> None:
    """Write ``restore_asset`` and ``restore_assets``."""
    buf.write(RESTORE_FUNCTIONS)
