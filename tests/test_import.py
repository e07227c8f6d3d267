"""Verify package imports work correctly."""


def test_import_consentdoc() -> None:
    """Test that consentdoc can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import consentdoc

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert consentdoc.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from consentdoc import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import consentdoc

    for name in consentdoc.__all__:
        assert hasattr(consentdoc, name), name
