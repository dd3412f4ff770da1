"""
Data source scaffolder: `geoff add data-source <name>`.

Steps (each fatal on error):
1. Membership check: .geoff must exist in the project root (configurable, on by default)
2. Create data_sources/<name> → classified errors
3. Select one of four metadata templates by DataSourceKind
4. Replace <<<data_source_name>>>
5. Write data_sources/<name>/metadata.md
6. Build the summary tree

The --database/--extract/--web flags are mutually exclusive; that is enforced
before this module runs (CLI + DataSourceSpec.from_flags).
"""

import logging
from pathlib import Path

from geoffrey.core.pleasant_error import raise_for_create_error
from geoffrey.domain.constants import (
    DATA_SOURCE_NAME_PLACEHOLDER,
    DATA_SOURCES_DIR,
    DIRECTORY_ICON,
    FILE_ICON,
    MARKER_FILENAME,
    METADATA_FILENAME,
)
from geoffrey.domain.errors import ErrorCodes, GeoffError
from geoffrey.domain.schemas import (
    DataSourceKind,
    DataSourceSpec,
    ScaffoldResult,
    TreeNode,
)
from geoffrey.templates.renderer import (
    load_template,
    replace_placeholders,
    warn_unresolved,
)

logger = logging.getLogger(__name__)

METADATA_TEMPLATES = {
    DataSourceKind.DATABASE: "data_sources/database_metadata.md",
    DataSourceKind.EXTRACT: "data_sources/extract_metadata.md",
    DataSourceKind.WEB: "data_sources/web_metadata.md",
    DataSourceKind.DEFAULT: "data_sources/default_metadata.md",
}

NOT_MANAGED_MESSAGE = (
    "This directory is not managed by geoff. Please change to a directory that is"
)

# add data-source has no --parents option
MISSING_DATA_SOURCES_HINT = (
    f"or run this command from the root of a geoff project, where {DATA_SOURCES_DIR}/ exists"
)


class DataSourceScaffolder:
    """Adds a data source to an existing geoff project."""

    def __init__(
        self,
        spec: DataSourceSpec,
        project_root: Path | None = None,
        require_marker: bool = True,
        templates_root: Path | None = None,
    ):
        """
        Args:
            spec: data source name + kind
            project_root: project directory (default: current directory)
            require_marker: refuse to run outside a .geoff project
            templates_root: template override (tests)
        """
        self.spec = spec
        self.project_root = project_root or Path(".")
        self.require_marker = require_marker
        self.templates_root = templates_root

    @property
    def display_path(self) -> Path:
        """data_sources/<name>, as shown to the user."""
        return Path(DATA_SOURCES_DIR) / self.spec.name

    @property
    def data_source_dir(self) -> Path:
        return self.project_root / self.display_path

    @property
    def metadata_path(self) -> Path:
        return self.data_source_dir / METADATA_FILENAME

    def check_managed(self) -> None:
        """
        Fail unless the project root holds the .geoff marker.

        Only a regular file counts; a directory named .geoff is rejected.

        Raises:
            GeoffError: NOT_MANAGED
        """
        marker = self.project_root / MARKER_FILENAME
        if marker.is_file():
            return

        logger.error(f"No {MARKER_FILENAME} marker in {self.project_root.resolve()}")
        raise GeoffError(
            ErrorCodes.NOT_MANAGED,
            NOT_MANAGED_MESSAGE,
            path=self.project_root,
        )

    def create_data_source(self) -> Path:
        """
        Create data_sources/<name>.

        Raises:
            GeoffError: ALREADY_EXISTS, MISSING_PARENT, PERMISSION_DENIED, UNKNOWN_ERROR
        """
        logger.info(f"Creating data source directory {self.display_path}")

        try:
            self.data_source_dir.mkdir()
        except OSError as e:
            raise_for_create_error(self.display_path, e, hint=MISSING_DATA_SOURCES_HINT)

        return self.data_source_dir

    def retrieve_metadata_contents(self) -> str:
        """Template body for spec.kind (DEFAULT when no flag was given)."""
        template = METADATA_TEMPLATES[self.spec.kind]
        logger.debug(f"Using {template} for {self.spec.kind.value} data source")
        return load_template(template, self.templates_root)

    def update_placeholders(self, text: str) -> str:
        """Replace every <<<data_source_name>>> with the base name."""
        text = replace_placeholders(
            text, {DATA_SOURCE_NAME_PLACEHOLDER: self.spec.base_name}
        )
        warn_unresolved(text, METADATA_TEMPLATES[self.spec.kind])
        return text

    def create_metadata(self, contents: str) -> Path:
        """
        Write data_sources/<name>/metadata.md.

        Raises:
            GeoffError: WRITE_FAILED
        """
        logger.info(f"Writing {METADATA_FILENAME} to {self.display_path}")

        try:
            self.metadata_path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise GeoffError(
                ErrorCodes.WRITE_FAILED,
                f"Unable to write {self.display_path / METADATA_FILENAME}",
                path=self.metadata_path,
                cause=e,
            ) from e

        return self.metadata_path

    def create_tree(self) -> TreeNode:
        tree = TreeNode(f"{DIRECTORY_ICON} {DATA_SOURCES_DIR}")
        source = tree.add_child(f"{DIRECTORY_ICON} {self.spec.name}")
        source.add_child(f"{FILE_ICON} {METADATA_FILENAME}")
        return tree

    def run(self) -> ScaffoldResult:
        """All steps in order."""
        if self.require_marker:
            self.check_managed()

        created = [self.create_data_source()]

        contents = self.update_placeholders(self.retrieve_metadata_contents())
        created.append(self.create_metadata(contents))

        return ScaffoldResult(
            name=self.spec.base_name,
            root=self.data_source_dir,
            tree=self.create_tree(),
            created_paths=created,
        )
