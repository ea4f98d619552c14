# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
from pathlib import Path

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # Python 3.10 fallback for local builds
    import tomli as tomllib

sys.path.insert(0, os.path.abspath(".."))

project = "custom_module"
author = "custom_module developers"

# Keep the docs version in sync with the package metadata
_pyproject_path = Path(__file__).resolve().parent.parent / "pyproject.toml"
with _pyproject_path.open("rb") as f:
    _pyproject = tomllib.load(f)

release = _pyproject["tool"]["poetry"]["version"]
version = release

extensions = [
    "sphinx.ext.napoleon",  # for Google-style and NumPy-style docstrings
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",  # links to the source code
    "sphinx.ext.autosummary",  # summary tables for documentation
    "myst_parser",  # markdown support
]
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

templates_path = ["_templates"]
exclude_patterns = [
    "_build",
    "Thumbs.db",
    ".DS_Store",
]

html_theme = "sphinx_rtd_theme"
