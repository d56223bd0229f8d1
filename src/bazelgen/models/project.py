"""Project metadata consumed by the rule builders.

These mirror what a build-graph exporter knows about a project: its
modules with their sources and dependency edges, the third-party jars it
pulls from Maven, and the toolchain version the workspace pins.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bazelgen.config import (
    BUILD_FILENAME,
    DEFAULT_RULES_SCALA_VERSION,
    DEFAULT_VISIBILITY,
)


_MISSING = object()


def _table(data, key: str) -> dict:
    """Check that a TOML value is a table."""
    if not isinstance(data, dict):
        raise TypeError(f"'{key}' must be a table, got {type(data).__name__}")
    return data


def _tables(data: dict, key: str) -> list[dict]:
    """Read an optional array of tables."""
    value = data.get(key, [])
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be an array of tables, got {type(value).__name__}")
    return [_table(item, key) for item in value]


def _string(data: dict, key: str, default=_MISSING) -> str | None:
    """Read a string value; a missing key without a default raises KeyError."""
    if key not in data:
        if default is _MISSING:
            raise KeyError(key)
        return default
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _strings(data: dict, key: str) -> list[str]:
    """Read an optional list of strings."""
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings, got {value!r}")
    return list(value)


@dataclass
class WorkspaceSpec:
    """Workspace-wide settings."""

    rules_scala_version: str = DEFAULT_RULES_SCALA_VERSION
    maven_repository: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> WorkspaceSpec:
        """Create a WorkspaceSpec from a dictionary."""
        return cls(
            rules_scala_version=_string(data, "rules_scala_version", DEFAULT_RULES_SCALA_VERSION),
            maven_repository=_string(data, "maven_repository", None),
        )


@dataclass
class ModuleSpec:
    """A single Scala module that becomes one BUILD file.

    Attributes:
        name: Target name of the scala_library
        srcs: Source files, relative to the module directory
        deps: Dependency labels (e.g. "//core:core")
        visibility: Visibility label for the library
        path: Package directory; defaults to the module name
        main_class: Fully-qualified main class; adds a scala_binary when set
    """

    name: str
    srcs: list[str] = field(default_factory=list)
    deps: list[str] = field(default_factory=list)
    visibility: str = DEFAULT_VISIBILITY
    path: str | None = None
    main_class: str | None = None

    @property
    def package(self) -> str:
        """Package directory of the module."""
        return self.name if self.path is None else self.path

    @property
    def build_file(self) -> str:
        """Path of the BUILD file relative to the workspace root."""
        package = self.package.strip("/")
        return f"{package}/{BUILD_FILENAME}" if package else BUILD_FILENAME

    @classmethod
    def from_dict(cls, data: dict) -> ModuleSpec:
        """Create a ModuleSpec from a dictionary."""
        return cls(
            name=_string(data, "name"),
            srcs=_strings(data, "srcs"),
            deps=_strings(data, "deps"),
            visibility=_string(data, "visibility", DEFAULT_VISIBILITY),
            path=_string(data, "path", None),
            main_class=_string(data, "main_class", None),
        )


@dataclass
class MavenArtifact:
    """A third-party jar fetched with maven_jar.

    Attributes:
        coordinates: Maven coordinates, group:artifact:version
        name: Repository name; derived from the coordinates when omitted
        repository: Repository URL; falls back to the workspace default
        bind: Name under //external; derived from the coordinates when omitted
    """

    coordinates: str
    name: str | None = None
    repository: str | None = None
    bind: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> MavenArtifact:
        """Create a MavenArtifact from a dictionary."""
        return cls(
            coordinates=_string(data, "coordinates"),
            name=_string(data, "name", None),
            repository=_string(data, "repository", None),
            bind=_string(data, "bind", None),
        )


@dataclass
class ProjectSpec:
    """Everything needed to generate a workspace's build files."""

    workspace: WorkspaceSpec = field(default_factory=WorkspaceSpec)
    modules: list[ModuleSpec] = field(default_factory=list)
    artifacts: list[MavenArtifact] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> ProjectSpec:
        """Create a ProjectSpec from a dictionary."""
        return cls(
            workspace=WorkspaceSpec.from_dict(_table(data.get("workspace", {}), "workspace")),
            modules=[ModuleSpec.from_dict(m) for m in _tables(data, "modules")],
            artifacts=[MavenArtifact.from_dict(a) for a in _tables(data, "artifacts")],
        )
