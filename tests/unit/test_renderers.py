"""Tests for bundled build file renderers and their orchestration."""

from unittest.mock import patch

from bazelgen.models.project import MavenArtifact, ModuleSpec, ProjectSpec, WorkspaceSpec
from bazelgen.renderers import render_project
from bazelgen.renderers.build_file import register_build_file_renderer as render_build_files
from bazelgen.renderers.workspace import register_build_file_renderer as render_workspace


def _project(**kwargs):
    return ProjectSpec(workspace=WorkspaceSpec(rules_scala_version="1.2.3"), **kwargs)


class TestWorkspaceRenderer:
    """Tests for the WORKSPACE renderer plugin."""

    def test_filename(self):
        (result,) = render_workspace(_project(), width=80)
        assert result["filename"] == "WORKSPACE"

    def test_preamble_only_without_artifacts(self):
        (result,) = render_workspace(_project(), width=80)

        assert result["content"].startswith("rules_scala_version = '1.2.3'\n")
        assert result["content"].endswith("scala_register_toolchains()\n")
        assert "maven_jar" not in result["content"]

    def test_artifacts_follow_preamble(self):
        project = _project(artifacts=[MavenArtifact("junit:junit:4.12")])
        content = render_workspace(project, width=80)[0]["content"]

        assert content.index("scala_register_toolchains()") < content.index("maven_jar(")
        assert "artifact = 'junit:junit:4.12'" in content
        assert "actual = '@junit_junit//jar'" in content


class TestBuildFileRenderer:
    """Tests for the BUILD renderer plugin."""

    def test_one_file_per_module(self):
        project = _project(modules=[ModuleSpec("core"), ModuleSpec("app")])
        results = render_build_files(project, width=80)

        assert [r["filename"] for r in results] == ["core/BUILD", "app/BUILD"]

    def test_no_modules(self):
        assert render_build_files(_project(), width=80) == []

    def test_content_starts_with_load(self):
        results = render_build_files(_project(modules=[ModuleSpec("core")]), width=120)
        content = results[0]["content"]

        assert content.startswith(
            "load('@io_bazel_rules_scala//scala:scala.bzl', "
            "'scala_binary', 'scala_library', 'scala_test')\n"
        )
        assert "scala_library(name = 'core'" in content

    def test_modules_sharing_package(self):
        project = _project(modules=[ModuleSpec("a", path="lib"), ModuleSpec("b", path="lib")])
        results = render_build_files(project, width=80)

        assert len(results) == 1
        content = results[0]["content"]
        assert content.count("load(") == 1
        assert content.index("name = 'a'") < content.index("name = 'b'")


class TestRenderProject:
    """Tests for render_project."""

    def test_bundled_renderers_sorted(self):
        project = _project(modules=[ModuleSpec("core"), ModuleSpec("app")])
        results = render_project(project)

        assert [r["filename"] for r in results] == ["WORKSPACE", "app/BUILD", "core/BUILD"]

    def test_width_is_forwarded(self):
        project = _project(modules=[ModuleSpec("core")])

        wide = {r["filename"]: r["content"] for r in render_project(project, width=200)}
        narrow = {r["filename"]: r["content"] for r in render_project(project, width=40)}

        assert wide["core/BUILD"].count("\n") < narrow["core/BUILD"].count("\n")

    def test_duplicate_filenames_keep_first(self):
        with (
            patch("bazelgen.renderers.pm") as mock_pm,
            patch("bazelgen.renderers.initialize_plugins"),
        ):
            mock_pm.hook.register_build_file_renderer.return_value = [
                [{"filename": "BUILD", "content": "first\n"}],
                None,
                [{"filename": "BUILD", "content": "second\n"}],
            ]

            results = render_project(_project())

        assert results == [{"filename": "BUILD", "content": "first\n"}]

    def test_hook_receives_project_and_width(self):
        project = _project()
        with (
            patch("bazelgen.renderers.pm") as mock_pm,
            patch("bazelgen.renderers.initialize_plugins"),
        ):
            mock_pm.hook.register_build_file_renderer.return_value = []
            render_project(project, width=60)

            kwargs = mock_pm.hook.register_build_file_renderer.call_args.kwargs
            assert kwargs["project"] is project
            assert kwargs["width"] == 60
