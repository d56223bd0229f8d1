"""Project metadata loading.

Projects are described in TOML:

    [workspace]
    rules_scala_version = "0f89c210ade8f4320017daf718a61de3c1ac4773"
    maven_repository = "${MAVEN_REPOSITORY:-https://repo1.maven.org/maven2}"

    [[modules]]
    name = "core"
    srcs = ["Core.scala"]
    deps = ["//external:jar/com/google/guava/guava"]

    [[artifacts]]
    coordinates = "com.google.guava:guava:23.0"

String values may reference environment variables.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomlkit

from bazelgen.config import DEFAULT_MAVEN_REPOSITORY, DEFAULT_RULES_SCALA_VERSION
from bazelgen.logging_config import get_logger
from bazelgen.models.project import ProjectSpec
from bazelgen.utils import expandvars_dict

logger = get_logger(__name__)


class ProjectLoadError(ValueError):
    """Raised when a project file cannot be read or does not describe a project."""


def parse_project(data: dict) -> ProjectSpec:
    """Build a ProjectSpec from already-parsed TOML data.

    Raises:
        ProjectLoadError: If a required key is missing or has the wrong shape
    """
    try:
        return ProjectSpec.from_dict(expandvars_dict(data))
    except KeyError as e:
        raise ProjectLoadError(f"Missing required key: {e.args[0]}") from e
    except (TypeError, AttributeError) as e:
        raise ProjectLoadError(f"Malformed project data: {e}") from e


def load_project(path: Path) -> ProjectSpec:
    """Load project metadata from a TOML file.

    Args:
        path: Path to the project file

    Returns:
        Parsed ProjectSpec

    Raises:
        ProjectLoadError: If the file is missing, unreadable or invalid
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ProjectLoadError(f"Project file not found: {path}") from e
    except OSError as e:
        raise ProjectLoadError(f"Could not read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ProjectLoadError(f"Invalid TOML in {path}: {e}") from e

    project = parse_project(data)
    logger.debug(
        f"Loaded {path}: {len(project.modules)} module(s), {len(project.artifacts)} artifact(s)"
    )
    return project


def example_project() -> str:
    """Generate a starter project file.

    Returns:
        TOML string content describing a small two-module project
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment("bazelgen project description"))

    workspace = tomlkit.table()
    workspace["rules_scala_version"] = DEFAULT_RULES_SCALA_VERSION
    workspace["maven_repository"] = f"${{MAVEN_REPOSITORY:-{DEFAULT_MAVEN_REPOSITORY}}}"
    doc["workspace"] = workspace

    modules = tomlkit.aot()

    core = tomlkit.table()
    core["name"] = "core"
    core["srcs"] = ["src/main/scala/Core.scala"]
    core["deps"] = ["//external:jar/com/google/guava/guava"]
    modules.append(core)

    app = tomlkit.table()
    app["name"] = "app"
    app["srcs"] = ["src/main/scala/Main.scala"]
    app["deps"] = ["//core:core"]
    app["main_class"] = "com.example.Main"
    modules.append(app)

    doc["modules"] = modules

    artifacts = tomlkit.aot()
    guava = tomlkit.table()
    guava["coordinates"] = "com.google.guava:guava:23.0"
    artifacts.append(guava)
    doc["artifacts"] = artifacts

    return tomlkit.dumps(doc)
