from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent
PKG_INIT = ROOT / "src" / "singleton_registry" / "__init__.py"


def _read_version() -> str:
    """Read ``__version__`` from the package without importing it."""

    m = re.search(r'^__version__ = "([^"]+)"', PKG_INIT.read_text(encoding="utf-8"), re.M)
    if m is None:
        raise RuntimeError(f"__version__ not found in {PKG_INIT}")
    return m.group(1)


setup(
    name="singleton-registry",
    version=_read_version(),
    description="Minimal object registry with a shared root instance and isolated local instances",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT License",
)
