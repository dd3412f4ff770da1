"""
Services layer: the geoff commands.

- create.py → geoff create
- add.py → geoff add data-source
"""

from .add import DataSourceScaffolder
from .create import ProjectScaffolder, create_project

__all__ = [
    "ProjectScaffolder",
    "create_project",
    "DataSourceScaffolder",
]
