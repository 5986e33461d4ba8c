# tests/core/test_authenticate.py
import pytest

from bookstore.adapters.persistence import SqlUserRepository
from bookstore.adapters.security import BcryptPasswordHasher, JWTTokenService
from bookstore.core.domain.exceptions import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidTokenError,
)
from bookstore.core.use_cases import Authenticate


@pytest.fixture
def tokens():
    return JWTTokenService(secret="test-secret-that-is-long-enough-for-hs256", expires_minutes=5)


@pytest.fixture
def auth(session, tokens):
    return Authenticate(SqlUserRepository(session), BcryptPasswordHasher(rounds=4), tokens)


class TestAuthenticate:

    def test_register_login_me(self, auth, tokens):
        user = auth.register("ada@example.com", "correct horse", username="ada")

        token = auth.login("ada@example.com", "correct horse")
        identity = tokens.verify(token)

        assert identity.id == user.id
        assert identity.email == "ada@example.com"
        assert auth.me(identity.id).username == "ada"

    def test_password_is_hashed(self, auth, session):
        auth.register("ada@example.com", "correct horse")

        stored = SqlUserRepository(session).get_by_email("ada@example.com")
        assert stored.password_hash != "correct horse"
        assert stored.password_hash.startswith("$2")

    def test_short_password(self, auth):
        with pytest.raises(InvalidInputError):
            auth.register("ada@example.com", "short")

    @pytest.mark.parametrize("password", ["x" * 73, "\u00e9" * 37])
    def test_password_longer_than_bcrypt_accepts(self, auth, password):
        """
        Scenario: the password exceeds 72 bytes (ASCII, or multi-byte characters).
        Expected: InvalidInputError before anything is hashed or stored.
        """
        with pytest.raises(InvalidInputError):
            auth.register("ada@example.com", password)

        assert auth.users.get_by_email("ada@example.com") is None

    def test_password_of_exactly_72_bytes(self, auth):
        auth.register("ada@example.com", "x" * 72)

        assert auth.login("ada@example.com", "x" * 72)

    def test_duplicate_email(self, auth):
        auth.register("ada@example.com", "correct horse")

        with pytest.raises(EmailAlreadyRegisteredError):
            auth.register("ada@example.com", "another password")

    @pytest.mark.parametrize(
        "email, password",
        [("ada@example.com", "wrong password"), ("nobody@example.com", "correct horse")],
    )
    def test_bad_credentials(self, auth, email, password):
        auth.register("ada@example.com", "correct horse")

        with pytest.raises(InvalidCredentialsError) as excinfo:
            auth.login(email, password)
        assert isinstance(excinfo.value, AuthenticationError)


class TestJWTTokenService:

    def test_tampered_token(self, tokens, auth):
        auth.register("ada@example.com", "correct horse")
        token = auth.login("ada@example.com", "correct horse")

        with pytest.raises(InvalidTokenError):
            tokens.verify(token + "x")

    def test_other_secret(self, auth):
        auth.register("ada@example.com", "correct horse")
        token = auth.login("ada@example.com", "correct horse")

        other = JWTTokenService(secret="a-different-secret-also-long-enough-ok")
        with pytest.raises(InvalidTokenError):
            other.verify(token)

    def test_expired_token(self, auth):
        user = auth.register("ada@example.com", "correct horse")
        expired = JWTTokenService(secret="test-secret-that-is-long-enough-for-hs256", expires_minutes=-1)

        with pytest.raises(InvalidTokenError):
            expired.verify(expired.issue(user))
