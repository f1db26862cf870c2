"""Loading storyboards from user Python scripts."""

import runpy
from pathlib import Path

from .storyboard import Storyboard


class ScriptLoadError(Exception):
    """Raised when a storyboard script cannot produce a storyboard."""
    pass


def load_storyboard(script_path: str, entrypoint: str) -> Storyboard:
    """
    Run a storyboard script and call its entrypoint.

    Args:
        script_path: Path to a Python file
        entrypoint: Name of the function in the script returning a Storyboard

    Returns:
        The storyboard built by the script

    Raises:
        ScriptLoadError: If the script is missing, fails to run, lacks the
            entrypoint, or the entrypoint returns something else
    """
    path = Path(script_path)
    if not path.is_file():
        raise ScriptLoadError(f"Script '{script_path}' not found")

    try:
        namespace = runpy.run_path(str(path), run_name="__osb_script__")
    except Exception as e:
        raise ScriptLoadError(f"Script '{script_path}' failed: {e}") from e

    build = namespace.get(entrypoint)
    if not callable(build):
        raise ScriptLoadError(f"Script '{script_path}' defines no '{entrypoint}' function")

    try:
        storyboard = build()
    except Exception as e:
        raise ScriptLoadError(f"'{entrypoint}' in '{script_path}' failed: {e}") from e

    if not isinstance(storyboard, Storyboard):
        raise ScriptLoadError(
            f"'{entrypoint}' must return a Storyboard (got {type(storyboard).__name__})"
        )
    return storyboard
