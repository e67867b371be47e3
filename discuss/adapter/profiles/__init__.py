"""Profile directory adapters.

Answer entity, feature flag and membership questions for the discussion
engine from the profiles subsystem.
"""

from .memory import InMemoryProfileDirectory
from .postgres import PostgresProfileDirectory

__all__ = ["InMemoryProfileDirectory", "PostgresProfileDirectory"]
