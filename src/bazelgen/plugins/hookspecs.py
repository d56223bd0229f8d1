"""Hook specifications for bazelgen plugins.

Plugins implement these hooks with the @hookimpl decorator to contribute
generated build files.

Example plugin implementation:

    from bazelgen import hookimpl
    from bazelgen.generators import render_file

    @hookimpl
    def register_build_file_renderer(project, width):
        return [{"filename": "tools/BUILD", "content": render_file([...], width)}]
"""

from types import ModuleType

import pluggy

from bazelgen.models.project import ProjectSpec

hookspec = pluggy.HookspecMarker("bazelgen")


class BuildFileSpec:
    """Hook specifications for build file renderers.

    Each hook uses Pluggy's dependency injection - plugins only need to
    declare the parameters they actually use.
    """

    @hookspec
    def register_build_file_renderer(
        self,
        bazelgen: ModuleType,
        project: ProjectSpec,
        width: int,
    ) -> list[dict] | None:
        """Render build files for a project.

        Args:
            bazelgen: The bazelgen module, for access to builders and renderer
            project: Project metadata
            width: Maximum line width for rendered text

        Returns:
            List of dicts, one per file:
                - filename: Path relative to the workspace root
                - content: Complete file content
            or None when the plugin has nothing to contribute.
        """
        ...
