"""Pluggy manager for build file renderers.

The bundled renderers produce WORKSPACE and one BUILD file per module.
Third-party packages can add more files by implementing
`register_build_file_renderer` and exposing their module under the
"bazelgen" entry point group.
"""

import contextlib
import importlib

import pluggy

from bazelgen.logging_config import get_logger
from bazelgen.plugins.hookspecs import BuildFileSpec

logger = get_logger(__name__)


# Renderers bundled with bazelgen, loaded on initialization
DEFAULT_PLUGINS = (
    "bazelgen.renderers.workspace",
    "bazelgen.renderers.build_file",
)


pm = pluggy.PluginManager("bazelgen")
pm.add_hookspecs(BuildFileSpec)

_initialized: bool = False


def _load_default_plugins() -> None:
    """Load plugins bundled with bazelgen."""
    for plugin_path in DEFAULT_PLUGINS:
        try:
            module = importlib.import_module(plugin_path)
            pm.register(module, name=plugin_path)
            logger.debug(f"Loaded plugin: {plugin_path}")
        except ImportError as e:
            logger.debug(f"Could not load plugin {plugin_path}: {e}")


def _load_external_plugins() -> None:
    """Discover and load external plugins via entry points."""
    try:
        num_loaded = pm.load_setuptools_entrypoints("bazelgen")
        if num_loaded > 0:
            logger.debug(f"Loaded {num_loaded} external plugin(s)")
    except Exception as e:
        logger.warning(f"Error loading external plugins: {e}")


def initialize_plugins() -> None:
    """Initialize the plugin system.

    Loads bundled plugins first, then discovers external plugins via
    entry points. Calling it again after the first time has no effect.
    """
    global _initialized

    if _initialized:
        return

    _load_default_plugins()
    _load_external_plugins()

    _initialized = True
    logger.debug(f"Plugin system initialized with {len(pm.get_plugins())} plugin(s)")


def reset_plugins() -> None:
    """Unregister all plugins and mark the system as uninitialized (mainly for testing)."""
    global _initialized

    for plugin in list(pm.get_plugins()):
        with contextlib.suppress(Exception):
            pm.unregister(plugin)

    _initialized = False


def get_plugins() -> list[dict]:
    """Get information about loaded plugins.

    Returns:
        List of plugin info dictionaries with name and module.
    """
    if not _initialized:
        initialize_plugins()

    plugins = []
    for plugin in pm.get_plugins():
        plugins.append(
            {
                "name": pm.get_name(plugin),
                "module": getattr(plugin, "__name__", str(plugin)),
            }
        )

    return sorted(plugins, key=lambda p: p["name"])


__all__ = [
    "pm",
    "DEFAULT_PLUGINS",
    "initialize_plugins",
    "reset_plugins",
    "get_plugins",
]
