# Sphinx configuration for the streamutil documentation.

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

import streamutil  # noqa: E402

project = 'streamutil'
copyright = '2026, streamutil developers'
author = 'streamutil developers'
release = streamutil.__version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx.ext.viewcode',
    'sphinx_autodoc_typehints',
    'sphinx_copybutton',
]

exclude_patterns = ['_build']
master_doc = 'index'

html_theme = 'furo'
html_title = 'streamutil'

# Stream handles are documented against the io module.
intersphinx_mapping = {'python': ('https://docs.python.org/3', None)}

napoleon_google_docstring = True
napoleon_numpy_docstring = False

autodoc_member_order = 'bysource'
# Everything is re-exported from the top-level package; document it once.
autodoc_default_options = {'imported-members': False}
