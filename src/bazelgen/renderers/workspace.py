"""WORKSPACE renderer plugin."""

from bazelgen import hookimpl
from bazelgen.config import WORKSPACE_FILENAME
from bazelgen.generators import render_file, third_party_statements, workspace_preamble
from bazelgen.models.project import ProjectSpec


@hookimpl
def register_build_file_renderer(project: ProjectSpec, width: int) -> list[dict]:
    """Render the WORKSPACE file.

    rules_scala setup comes first, followed by a maven_jar and bind pair
    for every third-party artifact.
    """
    statements = workspace_preamble(project.workspace.rules_scala_version)
    statements += third_party_statements(project.artifacts, project.workspace.maven_repository)

    return [
        {
            "filename": WORKSPACE_FILENAME,
            "content": render_file(statements, width),
        }
    ]
