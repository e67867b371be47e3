"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .profiles import ProfilesProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .profiles import ProdProfilesProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdProfilesProvider",
    "ProfilesProvider",
]
