"""Profile directory infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.adapter.profiles import PostgresProfileDirectory
from discuss.domain.service import EntityResolver, PermissionOracle
from discuss.util.di.base import ProviderBase


class ProfilesProvider(ProviderBase):
    """Profiles component base.

    The production directory reads through the request's database session,
    so it cannot run against mocked persistence.
    """

    __mock_component__ = "profiles"
    __depends_on__ = {"persistence"}


class ProdProfilesProvider(ProfilesProvider):
    """Production profiles provider reading the profiles subsystem tables."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_profile_directory(self, session: AsyncSession) -> PostgresProfileDirectory:
        """Provide profile directory bound to the request session."""
        return PostgresProfileDirectory(session)

    @provide(scope=Scope.REQUEST)
    def get_entity_resolver(
        self, directory: PostgresProfileDirectory
    ) -> EntityResolver:
        """Provide entity resolver."""
        return directory

    @provide(scope=Scope.REQUEST)
    def get_permission_oracle(
        self, directory: PostgresProfileDirectory
    ) -> PermissionOracle:
        """Provide permission oracle."""
        return directory
