"""
Tests for the declared dependency set.
"""
from importlib.metadata import version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestDependencies:

    def test_mcp_stays_on_the_fastmcp_major_version(self):
        assert '"mcp>=1.9,<2"' in PYPROJECT.read_text()
        assert version("mcp").split(".")[0] == "1"

    def test_directly_imported_libraries_are_declared(self):
        text = PYPROJECT.read_text()

        assert '"sqlalchemy>=2.0"' in text
        assert '"sqlmodel' in text

    def test_unused_libraries_are_not_declared(self):
        assert "python-dotenv" not in PYPROJECT.read_text()
