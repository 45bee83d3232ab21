"""Design helpers shared by chart rendering (motion preferences)."""

from . import reduced_motion  # noqa: F401
