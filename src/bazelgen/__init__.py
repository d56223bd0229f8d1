"""bazelgen: Generate Bazel WORKSPACE and BUILD files for Scala projects."""

import pluggy

from bazelgen.config import __version__
from bazelgen.generators import (
    build_preamble,
    render_expr,
    render_exprs,
    render_file,
    render_text,
    workspace_preamble,
)
from bazelgen.logging_config import get_logger

# Convenience export for plugins: from bazelgen import hookimpl
hookimpl = pluggy.HookimplMarker("bazelgen")

__all__ = [
    "__version__",
    "hookimpl",
    "build_preamble",
    "render_expr",
    "render_exprs",
    "render_file",
    "render_text",
    "workspace_preamble",
    "get_logger",
]
