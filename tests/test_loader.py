import os
import tempfile

import pytest

from gql_compose_core.lib.loader import load_source, load_sources


def test_load_raw_sdl():
    """Test anything that is not a path is treated as SDL text."""
    assert load_source("type Query { a: Int }") == ["type Query { a: Int }"]


def test_load_file(graphql_dir, vendor_type):
    """Test a single GraphQL file is read."""
    assert load_source(os.path.join(graphql_dir, "vendor_type.graphql")) == [vendor_type]


def test_load_directory_in_sorted_order(graphql_dir, client_type, product_type, vendor_type):
    """Test a directory yields one source per file, sorted by name."""
    assert load_source(graphql_dir) == [client_type, product_type, vendor_type]


def test_load_nested_directory():
    """Test subdirectories are walked and unrelated files ignored."""
    with tempfile.TemporaryDirectory() as temp_dir:
        os.makedirs(os.path.join(temp_dir, "b"))
        os.makedirs(os.path.join(temp_dir, "a"))
        for path, text in [
            ("a/one.gql", "type Query { one: Int }"),
            ("b/two.graphqls", "type Query { two: Int }"),
            ("root.graphql", "type Query { root: Int }"),
            ("notes.txt", "not sdl"),
            ("empty.graphql", "   \n"),
        ]:
            with open(os.path.join(temp_dir, path), "w", encoding="utf-8") as f:
                f.write(text)

        sources = load_source(temp_dir)

    assert sources == [
        "type Query { root: Int }",
        "type Query { one: Int }",
        "type Query { two: Int }",
    ]


def test_empty_directory_raises():
    """Test a directory without GraphQL files is an error."""
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(ValueError, match="No GraphQL files"):
            load_source(temp_dir)


def test_missing_file_raises():
    """Test a missing GraphQL path is not mistaken for SDL."""
    with pytest.raises(ValueError, match="File not found"):
        load_source("does/not/exist.graphql")


def test_load_sources_flattens(graphql_dir, vendor_type):
    """Test several sources are loaded in order."""
    sources = load_sources([os.path.join(graphql_dir, "vendor_type.graphql"), "scalar Date"])

    assert sources == [vendor_type, "scalar Date"]
