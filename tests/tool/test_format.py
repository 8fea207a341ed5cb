"""Tests for the format library."""

from kubedepot.tool.format import (
    JsonFormatter,
    PrintFormatter,
    YamlFormatter,
    format_columns,
)


def test_format_columns_empty() -> None:
    """Tests with no rows."""
    assert list(format_columns([], [])) == []


def test_format_columns_header_only() -> None:
    """Tests with a header and no rows."""
    assert list(format_columns(["a", "b", "c"], [])) == ["a    b    c"]


def test_format_columns_rows() -> None:
    """Tests format with normal rows."""
    assert list(
        format_columns(
            ["name", "server"],
            [["dev", "https://dev:6443"], ["staging", "https://staging:6443"]],
        )
    ) == [
        "name       server",
        "dev        https://dev:6443",
        "staging    https://staging:6443",
    ]


def test_print_formatter() -> None:
    """Print formatting with empty data."""
    formatter = PrintFormatter()
    assert list(formatter.format([])) == []


def test_print_formatter_data() -> None:
    """Print formatting data objects."""
    formatter = PrintFormatter()
    assert list(
        formatter.format(
            [
                {"name": "dev", "cluster": "dev-cluster"},
                {"name": "prod", "cluster": "prod-cluster"},
            ]
        )
    ) == [
        "NAME    CLUSTER",
        "dev     dev-cluster",
        "prod    prod-cluster",
    ]


def test_print_formatter_keys() -> None:
    """Print formatting with column names and missing values."""
    formatter = PrintFormatter(keys=["name", "server"])
    assert list(
        formatter.format(
            [
                {"name": "dev", "cluster": "dev-cluster"},
                {"name": "prod", "server": "https://prod"},
            ]
        )
    ) == [
        "NAME    SERVER",
        "dev",
        "prod    https://prod",
    ]


def test_yaml_formatter() -> None:
    """Yaml formatting keeps the key order."""
    formatter = YamlFormatter()
    assert list(formatter.format({"b": 1, "a": ["dev", "prod"]})) == [
        "b: 1",
        "a:",
        "- dev",
        "- prod",
    ]


def test_json_formatter() -> None:
    """Json formatting of a list of names."""
    formatter = JsonFormatter()
    assert list(formatter.format(["dev", "prod"])) == [
        "[",
        '  "dev",',
        '  "prod"',
        "]",
    ]
