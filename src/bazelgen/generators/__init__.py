"""Starlark generation: rule builders and the text renderer."""

from bazelgen.generators.builders import (
    bind,
    build_preamble,
    maven_bind_name,
    maven_jar,
    maven_jar_name,
    module_statements,
    scala_binary,
    scala_library,
    third_party_statements,
    workspace_preamble,
)
from bazelgen.generators.render import (
    quote,
    render_expr,
    render_exprs,
    render_file,
    render_text,
)

__all__ = [
    "bind",
    "build_preamble",
    "maven_bind_name",
    "maven_jar",
    "maven_jar_name",
    "module_statements",
    "scala_binary",
    "scala_library",
    "third_party_statements",
    "workspace_preamble",
    "quote",
    "render_expr",
    "render_exprs",
    "render_file",
    "render_text",
]
