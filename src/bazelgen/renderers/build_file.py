"""Per-module BUILD file renderer plugin."""

from bazelgen import hookimpl
from bazelgen.generators import build_preamble, module_statements, render_file
from bazelgen.models.project import ProjectSpec


@hookimpl
def register_build_file_renderer(project: ProjectSpec, width: int) -> list[dict]:
    """Render one BUILD file per module.

    Modules sharing a package directory are written to the same file, in
    the order they appear in the project.
    """
    packages: dict[str, list] = {}
    for module in project.modules:
        packages.setdefault(module.build_file, []).extend(module_statements(module))

    return [
        {
            "filename": filename,
            "content": render_file(build_preamble() + statements, width),
        }
        for filename, statements in packages.items()
    ]
