"""Unit tests for JWTService."""

import pytest

from discuss.config import AuthSettings
from discuss.domain.service import JWTService
from discuss.util.jwt import JWTError
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestJWTService:
    """Tests for token handling."""

    @pytest.mark.asyncio
    async def test_round_trip_user_id(self, unit_env):
        """A token created by the service identifies its user."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        user_id = str(new_user_id())

        # Act
        token = jwt_service.create_token(user_id)

        # Assert
        assert jwt_service.get_user_id_from_token(token) == user_id

    @pytest.mark.asyncio
    async def test_missing_or_garbage_token_is_anonymous(self, unit_env):
        """Unusable tokens identify nobody."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)

        # Act & Assert
        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("not-a-token") is None

    def test_foreign_secret_rejected(self):
        """Tokens signed with another secret fail verification."""
        # Arrange
        issuer = JWTService(AuthSettings(jwt_secret="issuer-secret"))
        verifier = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = issuer.create_token(str(new_user_id()))

        # Act & Assert
        with pytest.raises(JWTError):
            verifier.verify_token(token)

    def test_expired_token_rejected(self):
        """Expired tokens fail verification."""
        # Arrange
        jwt_service = JWTService(AuthSettings(jwt_expiry_days=-1))
        token = jwt_service.create_token(str(new_user_id()))

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
