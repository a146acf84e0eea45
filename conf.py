# Sphinx configuration for the ReviewSlugs API docs.
# Build from the project root:  sphinx-build -b html . _build/html
# Config reference: https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------
# Modules are namespace packages (no __init__.py) that live next to this file.
import os
import sys

sys.path.insert(0, os.path.abspath("."))

# -- Project information -----------------------------------------------------
project = "ReviewSlugs"
author = "Ty Baker"
copyright = "2026, Ty Baker"
release = "0.1.0"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",   # module/function docstrings
    "sphinx.ext.napoleon",  # "Args:" / "Returns:" / "Raises:" sections
    "sphinx.ext.viewcode",  # [source] links
]

root_doc = "index"
source_suffix = {".rst": "restructuredtext"}

# Only index.rst is a doc source; everything else at the root is code or notes.
exclude_patterns = [
    "_build",
    "tests",
    "scripts",
    ".tmp_uploads",
    "*.md",
]

# The Streamlit page isn't documented, but keep imports cheap if someone adds it.
autodoc_mock_imports = ["streamlit"]

autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}
# Registry order and module layout read better than alphabetical.
autodoc_member_order = "bysource"
autodoc_typehints = "description"

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = True

# -- Options for HTML output -------------------------------------------------
html_theme = "alabaster"
html_title = f"{project} {release}"
pygments_style = "sphinx"
