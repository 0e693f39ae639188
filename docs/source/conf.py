# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath('../../src'))

from arrayforge import __version__  # noqa: E402

project = 'arrayforge'
copyright = '2025-2026 Vlad (Volodymyr) Pavlov'
author = 'Vlad (Volodymyr) Pavlov'
version = release = __version__

extensions = [
    'sphinx.ext.autodoc',        # API pages from module docstrings
    'sphinx.ext.napoleon',       # Google-style Args/Returns/Raises sections
    'sphinx.ext.viewcode',       # Source code links
    'sphinx.ext.intersphinx',    # Links to builtins such as TypeError
    'sphinx_autodoc_typehints',  # Type hint rendering
    'sphinx_copybutton',         # Copy buttons for the Example blocks
]

# api.rst documents each helper module with automodule
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_admonition_for_examples = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}

typehints_fully_qualified = False
always_document_param_types = True

html_theme = 'pydata_sphinx_theme'
html_theme_options = {
    'navigation_depth': 2,
    'logo': {
        'text': 'arrayforge',
    },
}
html_title = f'{project} v{version}'
