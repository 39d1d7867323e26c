"""Tests for the writers and the writer registry."""

import gzip
import io

import pytest

from asset_bindata.core.types import Asset, Config
from asset_bindata.registry import WriterRegistry
from asset_bindata.writers import DebugWriter, ReleaseWriter, build_tree, write_toc, write_toc_tree
from asset_bindata.writers.release import BYTES_PER_LINE, write_bytes_literal


def make_asset(name: str, func: str) -> Asset:
    return Asset(path=f"/src/{name}", name=name, func=func)


class TestRegistry:
    """Test writer registration and creation."""

    def test_builtin_writers_registered(self) -> None:
        assert {"release", "debug", "dev"} <= set(WriterRegistry.list_writers())

    def test_create_writers(self) -> None:
        """Test that factories honour their arguments."""
        release = WriterRegistry.create_writer("release", compress=False)
        assert isinstance(release, ReleaseWriter)
        assert release.compress is False

        dev = WriterRegistry.create_writer("dev", compress=True)
        assert isinstance(dev, DebugWriter)
        assert dev.dev is True

    def test_unknown_writer(self) -> None:
        with pytest.raises(ValueError, match="Unknown writer: 'go'"):
            WriterRegistry.create_writer("go")


class TestBytesLiteral:
    """Test embedding of binary data."""

    def test_splits_long_data(self) -> None:
        data = bytes(range(256))
        buf = io.StringIO()
        write_bytes_literal(buf, "_x_data", data)
        source = buf.getvalue()

        assert source.count("\n") == 256 // BYTES_PER_LINE + 2
        namespace: dict[str, bytes] = {}
        exec(source, namespace)
        assert namespace["_x_data"] == data

    def test_empty_data(self) -> None:
        buf = io.StringIO()
        write_bytes_literal(buf, "_x_data", b"")
        assert buf.getvalue() == '_x_data = b""\n'

    def test_release_asset_is_gzip(self, tmp_path) -> None:
        """Test that compressed output decompresses to the file contents."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"payload" * 10)
        asset = Asset(path=str(path), name="a.txt", func="aTxt")

        buf = io.StringIO()
        ReleaseWriter(compress=True).write_asset(buf, Config(), asset)
        namespace: dict[str, object] = {}
        exec(buf.getvalue().split("\n\ndef ")[0], namespace)
        assert gzip.decompress(namespace["_aTxt_data"]) == b"payload" * 10  # type: ignore[arg-type]


class TestTree:
    """Test the asset tree."""

    def test_build_tree(self) -> None:
        toc = [
            make_asset("a.txt", "aTxt"),
            make_asset("img/x.png", "imgXPng"),
            make_asset("img/icons/y.png", "imgIconsYPng"),
        ]
        root = build_tree(toc)

        assert root.func is None
        assert sorted(root.children) == ["a.txt", "img"]
        assert root.children["a.txt"].func == "aTxtAsset"
        assert root.children["img"].children["icons"].children["y.png"].func == "imgIconsYPngAsset"

    def test_file_then_directory_conflict(self) -> None:
        """Test that a file cannot also hold children."""
        toc = [make_asset("x", "x"), make_asset("x/y.txt", "xYTxt")]
        with pytest.raises(ValueError, match="Asset x is both a file and a directory"):
            build_tree(toc)

    def test_directory_then_file_conflict(self) -> None:
        toc = [make_asset("x/y/z.txt", "xYZTxt"), make_asset("x/y", "xY")]
        with pytest.raises(ValueError, match="Asset x/y is both a file and a directory"):
            build_tree(toc)

    def test_duplicate_file_names_are_allowed(self) -> None:
        """Test that the same name from two inputs resolves to the last asset."""
        toc = [make_asset("a.txt", "aTxt"), make_asset("a.txt", "aTxt2")]
        assert build_tree(toc).children["a.txt"].func == "aTxt2Asset"

    def test_tree_source_is_sorted(self) -> None:
        """Test that the rendered tree lists children in sorted order."""
        toc = [make_asset("b/z.txt", "bZTxt"), make_asset("a.txt", "aTxt")]
        buf = io.StringIO()
        write_toc_tree(buf, toc)
        source = buf.getvalue()

        assert source.index("'a.txt'") < source.index("'b'") < source.index("'z.txt'")
        assert "_bintree = _BinTree(None, {\n" in source

    def test_empty_tree(self) -> None:
        buf = io.StringIO()
        write_toc_tree(buf, [])
        assert "_bintree = _BinTree(None, {})\n" in buf.getvalue()


class TestToc:
    """Test the table of contents."""

    def test_toc_keeps_catalog_order(self) -> None:
        toc = [make_asset("b.txt", "bTxt"), make_asset("a.txt", "aTxt")]
        buf = io.StringIO()
        write_toc(buf, toc)
        source = buf.getvalue()

        assert "    'b.txt': bTxtAsset,\n    'a.txt': aTxtAsset,\n" in source
