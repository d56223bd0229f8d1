"""Builders for the rule shapes bazelgen emits.

Each builder is a pure function from caller metadata to expression nodes.
Nothing is validated: empty names or conflicting labels pass through
unchanged.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from bazelgen.config import (
    BINARY_SUFFIX,
    DEFAULT_MAVEN_REPOSITORY,
    RULES_SCALA_BZL,
    RULES_SCALA_PREFIX_TEMPLATE,
    RULES_SCALA_REPO_NAME,
    RULES_SCALA_TOOLCHAINS_BZL,
    RULES_SCALA_URL_TEMPLATE,
    RULES_SCALA_VERSION_VAR,
)
from bazelgen.models.expr import Assign, BinOp, Call, Expr, List, Load, Str, Var, str_list
from bazelgen.models.project import MavenArtifact, ModuleSpec
from bazelgen.utils import sanitize_identifier


def scala_library(
    name: str, deps: Sequence[str], visibility: str, srcs: Sequence[str]
) -> Expr:
    """scala_library(name, deps, visibility, srcs), arguments in that order."""
    return Call(
        "scala_library",
        (
            ("name", Str(name)),
            ("deps", str_list(deps)),
            ("visibility", List((Str(visibility),))),
            ("srcs", str_list(srcs)),
        ),
    )


def scala_binary(name: str, deps: Sequence[str], main_class: str) -> Expr:
    return Call(
        "scala_binary",
        (
            ("name", Str(name)),
            ("deps", str_list(deps)),
            ("main_class", Str(main_class)),
        ),
    )


def bind(name: str, actual: str) -> Expr:
    return Call("bind", (("name", Str(name)), ("actual", Str(actual))))


def maven_jar(jar_name: str, coordinates: str, repository: str) -> Expr:
    return Call(
        "maven_jar",
        (
            ("name", Str(jar_name)),
            ("artifact", Str(coordinates)),
            ("repository", Str(repository)),
        ),
    )


def workspace_preamble(rules_version: str) -> list[Expr]:
    """Statements that fetch rules_scala and register its toolchains.

    The archive URL and strip prefix are %-formatted against a variable
    bound to `rules_version`, so bumping the version is a one-line edit.
    """
    version = Var(RULES_SCALA_VERSION_VAR)
    return [
        Assign(RULES_SCALA_VERSION_VAR, Str(rules_version)),
        Call(
            "http_archive",
            (
                ("name", Str(RULES_SCALA_REPO_NAME)),
                ("url", BinOp("%", Str(RULES_SCALA_URL_TEMPLATE), version)),
                ("type", Str("zip")),
                ("strip_prefix", BinOp("%", Str(RULES_SCALA_PREFIX_TEMPLATE), version)),
            ),
        ),
        Load(Str(RULES_SCALA_BZL), (Str("scala_repositories"),)),
        Call("scala_repositories"),
        Load(Str(RULES_SCALA_TOOLCHAINS_BZL), (Str("scala_register_toolchains"),)),
        Call("scala_register_toolchains"),
    ]


def build_preamble() -> list[Expr]:
    """The load() placed at the top of every BUILD file."""
    return [
        Load(
            Str(RULES_SCALA_BZL),
            (Str("scala_binary"), Str("scala_library"), Str("scala_test")),
        )
    ]


def _split_coordinates(coordinates: str) -> tuple[str, str]:
    parts = coordinates.split(":")
    group = parts[0]
    artifact = parts[1] if len(parts) > 1 else ""
    return group, artifact


def maven_jar_name(coordinates: str) -> str:
    """Repository name for a jar, e.g. 'com.google.guava:guava:23.0' -> 'com_google_guava_guava'."""
    group, artifact = _split_coordinates(coordinates)
    return sanitize_identifier(f"{group}_{artifact}" if artifact else group)


def maven_bind_name(coordinates: str) -> str:
    """//external name for a jar, e.g. 'jar/com/google/guava/guava'."""
    group, artifact = _split_coordinates(coordinates)
    path = group.replace(".", "/")
    return f"jar/{path}/{artifact}" if artifact else f"jar/{path}"


def third_party_statements(
    artifacts: Iterable[MavenArtifact], default_repository: str | None = None
) -> list[Expr]:
    """A maven_jar and its //external bind for every artifact, in input order."""
    repository_fallback = default_repository or DEFAULT_MAVEN_REPOSITORY
    statements: list[Expr] = []
    for artifact in artifacts:
        jar_name = artifact.name or maven_jar_name(artifact.coordinates)
        statements.append(
            maven_jar(jar_name, artifact.coordinates, artifact.repository or repository_fallback)
        )
        statements.append(
            bind(artifact.bind or maven_bind_name(artifact.coordinates), f"@{jar_name}//jar")
        )
    return statements


def module_statements(module: ModuleSpec) -> list[Expr]:
    """The library target of a module, plus a binary when it has a main class."""
    statements = [scala_library(module.name, module.deps, module.visibility, module.srcs)]
    if module.main_class:
        statements.append(
            scala_binary(f"{module.name}{BINARY_SUFFIX}", [f":{module.name}"], module.main_class)
        )
    return statements
