# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os

import tomli

_PATH_HERE = os.path.abspath(os.path.dirname(__file__))
_PATH_PYPROJECT = os.path.realpath(os.path.join(_PATH_HERE, "..", "..", "pyproject.toml"))

# Name and version come from pyproject.toml, so that they are not duplicated here.
with open(_PATH_PYPROJECT, mode="rb") as fp:
    _project_config = tomli.load(fp)["project"]

project = _project_config["name"]
release = _project_config["version"]

extensions = [
    "sphinx.ext.autodoc",
    "sphinx_autodoc_typehints",
    "sphinx.ext.intersphinx",
]

html_theme = "furo"
html_title = project

autodoc_member_order = "bysource"
intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}
