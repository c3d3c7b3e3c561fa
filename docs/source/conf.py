# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

import os
import sys
import sphinx_rtd_dark_mode

# Project root on sys.path so autodoc can import sim/, relay/, server/, ui/
sys.path.insert(0, os.path.abspath("../.."))

project = 'Flappy Arcade'
copyright = '2026, Flappy Arcade developers'
author = 'Flappy Arcade developers'
release = '1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",    # generate docs from docstrings
    "sphinx.ext.napoleon",   # sim/ uses NumPy style, relay/ uses Google style
    "sphinx.ext.viewcode",   # add links to source code
    "sphinx_rtd_dark_mode"
]

templates_path = ['_templates']
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_static_path = ['_static']

# -- Mock imports so the docs build without the runtime stack installed -----
autodoc_mock_imports = ["pygame", "aiohttp", "uvicorn"]
