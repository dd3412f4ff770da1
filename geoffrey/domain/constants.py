"""
Domain Constants: fixed names shared across geoff commands.

Layout policy, marker file, placeholder tokens and tree icons.
"""

# =============================================================================
# Project Layout
# =============================================================================
# <name>/
# ├── data_sources/
# ├── explorations/
# ├── models/
# ├── products/
# ├── README.md            (placeholder substituted)
# ├── project_scoping.md   (placeholder substituted)
# └── .geoff               (zero bytes, verbatim)

DATA_SOURCES_DIR = "data_sources"
EXPLORATIONS_DIR = "explorations"
MODELS_DIR = "models"
PRODUCTS_DIR = "products"

PROJECT_SUBDIRECTORIES = (
    DATA_SOURCES_DIR,
    EXPLORATIONS_DIR,
    MODELS_DIR,
    PRODUCTS_DIR,
)

README_FILENAME = "README.md"
PROJECT_SCOPING_FILENAME = "project_scoping.md"

# Templated root files, in tree order
PROJECT_TEMPLATE_FILES = (
    README_FILENAME,
    PROJECT_SCOPING_FILENAME,
)

# =============================================================================
# Marker File
# =============================================================================
# Presence of this file at a project root means "managed by geoff".
# Never placeholder-substituted, never shown in the tree.

MARKER_FILENAME = ".geoff"
MARKER_CONTENTS = ""

# =============================================================================
# Data Sources
# =============================================================================
# data_sources/<name>/
# └── metadata.md

METADATA_FILENAME = "metadata.md"

# =============================================================================
# Placeholders
# =============================================================================

PROJECT_NAME_PLACEHOLDER = "<<<project_name>>>"
DATA_SOURCE_NAME_PLACEHOLDER = "<<<data_source_name>>>"

# =============================================================================
# Console Output
# =============================================================================

DIRECTORY_ICON = "\U0001F5BF"  # 🖿
FILE_ICON = "\U0001F5CE"  # 🗎
CREATED_ICON = "\U0001F680"  # 🚀

ISSUES_URL = "https://github.com/stats-student/geoffrey-rs/issues"
