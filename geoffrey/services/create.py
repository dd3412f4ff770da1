"""
Project scaffolder: `geoff create <name>`.

Steps (each fatal on error, no cleanup of what was already created):
1. Create root (recursive only with --parents) → classified errors
2. Create data_sources/, explorations/, models/, products/
3. Write README.md, project_scoping.md (placeholder substituted) and .geoff (verbatim)
4. Build the summary tree (.geoff excluded)
"""

import logging
from pathlib import Path

from geoffrey.core.pleasant_error import raise_for_create_error
from geoffrey.domain.constants import (
    DIRECTORY_ICON,
    FILE_ICON,
    MARKER_CONTENTS,
    MARKER_FILENAME,
    PROJECT_NAME_PLACEHOLDER,
    PROJECT_SUBDIRECTORIES,
    PROJECT_TEMPLATE_FILES,
)
from geoffrey.domain.errors import ErrorCodes, GeoffError
from geoffrey.domain.schemas import ProjectSpec, ScaffoldResult, TreeNode
from geoffrey.templates.renderer import render_template

logger = logging.getLogger(__name__)

# Root file → bundled template (relative to geoffrey/templates/)
ROOT_TEMPLATES = {filename: f"root/{filename}" for filename in PROJECT_TEMPLATE_FILES}


class ProjectScaffolder:
    """
    Creates a new geoff project.

    Usage:
        scaffolder = ProjectScaffolder(ProjectSpec(Path("test_project")))
        result = scaffolder.run()
        print(result.tree.render())
    """

    def __init__(self, spec: ProjectSpec, templates_root: Path | None = None):
        """
        Args:
            spec: project name + --parents
            templates_root: template override (tests)
        """
        self.spec = spec
        self.templates_root = templates_root

    @property
    def root(self) -> Path:
        return self.spec.name

    def create_root(self) -> Path:
        """
        Create the project root.

        Without create_parents the immediate parent must already exist.

        Raises:
            GeoffError: ALREADY_EXISTS, MISSING_PARENT, PERMISSION_DENIED, UNKNOWN_ERROR
        """
        logger.info(f"Creating project root at {self.root}")

        try:
            self.root.mkdir(parents=self.spec.create_parents)
        except OSError as e:
            raise_for_create_error(self.root, e)

        return self.root

    def create_subdirectories(self) -> list[Path]:
        """
        Create the four managed subdirectories.

        Raises:
            GeoffError: CREATE_FAILED
        """
        created = []

        for subdir in PROJECT_SUBDIRECTORIES:
            path = self.root / subdir
            logger.info(f"Creating project sub directory: {subdir}")

            try:
                path.mkdir()
            except OSError as e:
                raise GeoffError(
                    ErrorCodes.CREATE_FAILED,
                    f"Unable to create {path}",
                    path=path,
                    cause=e,
                ) from e

            created.append(path)

        return created

    def render_root_file(self, filename: str) -> str:
        """Template body for a root file with <<<project_name>>> replaced."""
        return render_template(
            ROOT_TEMPLATES[filename],
            {PROJECT_NAME_PLACEHOLDER: self.spec.base_name},
            templates_root=self.templates_root,
        )

    def create_files(self) -> list[Path]:
        """
        Write README.md, project_scoping.md and the .geoff marker.

        Raises:
            GeoffError: WRITE_FAILED, TEMPLATE_NOT_FOUND
        """
        contents = {
            filename: self.render_root_file(filename) for filename in PROJECT_TEMPLATE_FILES
        }
        # marker: verbatim, never a template
        contents[MARKER_FILENAME] = MARKER_CONTENTS

        created = []
        for filename, text in contents.items():
            path = self.root / filename
            logger.info(f"Writing {filename} to root folder")

            try:
                path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise GeoffError(
                    ErrorCodes.WRITE_FAILED,
                    f"Unable to write {path}",
                    path=path,
                    cause=e,
                ) from e

            created.append(path)

        return created

    def create_tree(self) -> TreeNode:
        """Summary tree: root → subdirectories, then templated files."""
        tree = TreeNode(str(self.root))
        for subdir in PROJECT_SUBDIRECTORIES:
            tree.add_child(f"{DIRECTORY_ICON} {subdir}")
        for filename in PROJECT_TEMPLATE_FILES:
            tree.add_child(f"{FILE_ICON} {filename}")
        return tree

    def run(self) -> ScaffoldResult:
        """All steps in order."""
        created = [self.create_root()]
        created.extend(self.create_subdirectories())
        created.extend(self.create_files())

        return ScaffoldResult(
            name=self.spec.base_name,
            root=self.root,
            tree=self.create_tree(),
            created_paths=created,
        )


# =============================================================================
# Convenience Functions
# =============================================================================


def create_project(name: Path, create_parents: bool = False) -> ScaffoldResult:
    """
    Scaffold a project (shortcut).

    Args:
        name: project path
        create_parents: create missing ancestors too

    Returns:
        ScaffoldResult
    """
    return ProjectScaffolder(ProjectSpec(Path(name), create_parents)).run()
