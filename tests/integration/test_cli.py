"""Tests for CLI commands."""

from click.testing import CliRunner

from bazelgen.cli import cli

runner = CliRunner()


WORKSPACE_1_2_3 = """\
rules_scala_version = '1.2.3'
http_archive(
    name = 'io_bazel_rules_scala',
    url = 'https://github.com/bazelbuild/rules_scala/archive/%s.zip' % rules_scala_version,
    type = 'zip',
    strip_prefix = 'rules_scala-%s' % rules_scala_version
)
load('@io_bazel_rules_scala//scala:scala.bzl', 'scala_repositories')
scala_repositories()
load('@io_bazel_rules_scala//scala:toolchains.bzl', 'scala_register_toolchains')
scala_register_toolchains()
"""


class TestCLIHelp:
    """Test CLI help output."""

    def test_main_help(self):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("workspace", "render", "example", "list-plugins"):
            assert command in result.output

    def test_render_help(self):
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--file" in result.output
        assert "--width" in result.output

    def test_version(self):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "bazelgen" in result.output


class TestLoggingOptions:
    """Test logging option validation."""

    def test_mutually_exclusive_verbose_quiet(self):
        result = runner.invoke(cli, ["--verbose", "--quiet", "example"])
        assert result.exit_code != 0
        assert "mutually exclusive" in result.output

    def test_mutually_exclusive_log_level(self):
        result = runner.invoke(cli, ["-v", "--log-level", "DEBUG", "example"])
        assert result.exit_code != 0


class TestWorkspaceCommand:
    """Tests for the workspace command."""

    def test_prints_preamble(self):
        result = runner.invoke(cli, ["workspace", "--rules-version", "1.2.3", "--width", "100"])

        assert result.exit_code == 0
        assert result.output == WORKSPACE_1_2_3

    def test_rejects_zero_width(self):
        result = runner.invoke(cli, ["workspace", "--width", "0"])
        assert result.exit_code != 0


class TestRenderCommand:
    """Tests for the render command."""

    def test_prints_all_files(self, project_file):
        result = runner.invoke(cli, ["render", str(project_file)])

        assert result.exit_code == 0
        for filename in ("WORKSPACE", "app/BUILD", "core/BUILD"):
            assert filename in result.output
        assert "scala_binary(" in result.output

    def test_single_file_is_raw(self, project_file):
        result = runner.invoke(cli, ["render", str(project_file), "--file", "app/BUILD"])

        assert result.exit_code == 0
        assert result.output.startswith("load(\n")
        assert result.output.endswith(")\n")
        assert "WORKSPACE" not in result.output

    def test_unknown_file(self, project_file):
        result = runner.invoke(cli, ["render", str(project_file), "--file", "nope/BUILD"])

        assert result.exit_code == 1
        assert "No generated file named nope/BUILD" in result.output
        assert "core/BUILD" in result.output

    def test_missing_project(self, tmp_path):
        result = runner.invoke(cli, ["render", str(tmp_path / "missing.toml")])

        assert result.exit_code == 1
        assert "Project file not found" in result.output


class TestRenderOutputIsVerbatim:
    """Generated text is printed exactly as rendered."""

    def test_colon_names_are_not_replaced(self, tmp_path):
        path = tmp_path / "project.toml"
        path.write_text('[[artifacts]]\ncoordinates = "com.example:rocket:1.0"\n')

        full = runner.invoke(cli, ["render", str(path)])
        single = runner.invoke(cli, ["render", str(path), "--file", "WORKSPACE"])

        assert full.exit_code == 0
        assert "artifact = 'com.example:rocket:1.0'" in full.output
        assert single.output in full.output

    def test_badly_typed_project_reported_as_error(self, tmp_path):
        path = tmp_path / "project.toml"
        path.write_text("[workspace]\nrules_scala_version = 1.2\n")

        result = runner.invoke(cli, ["render", str(path)])

        assert result.exit_code == 1
        assert "rules_scala_version" in result.output
        assert not isinstance(result.exception, TypeError)


class TestExampleCommand:
    """Tests for the example command."""

    def test_round_trips_through_render(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MAVEN_REPOSITORY", raising=False)
        example = runner.invoke(cli, ["example"])
        assert example.exit_code == 0

        path = tmp_path / "project.toml"
        path.write_text(example.output)

        result = runner.invoke(cli, ["render", str(path), "--file", "WORKSPACE"])
        assert result.exit_code == 0
        assert "repository = 'https://repo1.maven.org/maven2'" in result.output


class TestListPluginsCommand:
    """Tests for the list-plugins command."""

    def test_lists_bundled_renderers(self):
        result = runner.invoke(cli, ["list-plugins"])

        assert result.exit_code == 0
        assert "bazelgen.renderers.workspace" in result.output
        assert "bazelgen.renderers.build_file" in result.output
