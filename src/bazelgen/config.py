"""Configuration constants for bazelgen."""

# Version
__version__ = "0.1.0"

# Layout settings
DEFAULT_WIDTH = 80
"""Maximum line width the renderer tries to stay within"""

DEFAULT_INDENT = 4
"""Indentation of broken argument and list lines (buildifier style)"""

# rules_scala workspace setup
DEFAULT_RULES_SCALA_VERSION = "0f89c210ade8f4320017daf718a61de3c1ac4773"
"""rules_scala commit used when a project does not pin one"""

RULES_SCALA_REPO_NAME = "io_bazel_rules_scala"
RULES_SCALA_VERSION_VAR = "rules_scala_version"
RULES_SCALA_URL_TEMPLATE = "https://github.com/bazelbuild/rules_scala/archive/%s.zip"
RULES_SCALA_PREFIX_TEMPLATE = "rules_scala-%s"
RULES_SCALA_BZL = "@io_bazel_rules_scala//scala:scala.bzl"
RULES_SCALA_TOOLCHAINS_BZL = "@io_bazel_rules_scala//scala:toolchains.bzl"

# Module defaults
DEFAULT_VISIBILITY = "//visibility:public"
"""Visibility label applied to generated libraries"""

BINARY_SUFFIX = "_bin"
"""Suffix appended to a module name for its scala_binary target"""

# Third-party artifacts
DEFAULT_MAVEN_REPOSITORY = "https://repo1.maven.org/maven2"
"""Repository used for maven_jar rules that do not name one"""

# File names
WORKSPACE_FILENAME = "WORKSPACE"
BUILD_FILENAME = "BUILD"
