"""Package index targets."""

from __future__ import annotations

from enum import StrEnum

__all__ = ["Target", "PYPI_SIMPLE_URL", "TESTPYPI_SIMPLE_URL"]

PYPI_SIMPLE_URL = "https://pypi.org/simple"
TESTPYPI_SIMPLE_URL = "https://test.pypi.org/simple/"


class Target(StrEnum):
    """Index a run uploads to and verifies against."""

    testpypi = "testpypi"
    pypi = "pypi"

    @property
    def twine_args(self) -> list[str]:
        """Repository selection for ``twine upload``."""
        if self == Target.testpypi:
            return ["--repository", "testpypi"]
        return []

    @property
    def pip_index_args(self) -> list[str]:
        """Index selection for ``pip install``.

        TestPyPI only hosts what was uploaded there, so PyPI stays reachable
        as an extra index for the package's own dependencies.
        """
        if self == Target.testpypi:
            return [
                "--index-url",
                TESTPYPI_SIMPLE_URL,
                "--extra-index-url",
                PYPI_SIMPLE_URL,
            ]
        return []
