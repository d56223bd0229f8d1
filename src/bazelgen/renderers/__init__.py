"""Build file renderer orchestration."""

import bazelgen
from bazelgen.config import DEFAULT_WIDTH
from bazelgen.logging_config import get_logger
from bazelgen.models.project import ProjectSpec
from bazelgen.plugins import initialize_plugins, pm

logger = get_logger(__name__)


def render_project(project: ProjectSpec, width: int = DEFAULT_WIDTH) -> list[dict]:
    """Invoke all registered renderers for a project.

    Args:
        project: Project metadata
        width: Maximum line width for rendered text

    Returns:
        List of {"filename", "content"} dicts sorted by filename. When two
        plugins produce the same filename, the first result is kept.
    """
    initialize_plugins()

    files: dict[str, dict] = {}
    for plugin_result in pm.hook.register_build_file_renderer(
        bazelgen=bazelgen,
        project=project,
        width=width,
    ):
        if not plugin_result:
            continue

        for result in plugin_result:
            filename = result["filename"]
            if filename in files:
                logger.warning(f"Duplicate output for {filename}; keeping the first")
                continue
            files[filename] = result
            logger.debug(f"Rendered {filename}")

    return [files[name] for name in sorted(files)]
