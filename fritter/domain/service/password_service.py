"""Password hashing domain service."""

from passlib.context import CryptContext

from .base import Service

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class PasswordService(Service):
    """Hashes and verifies account passwords."""

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        return pwd_context.verify(password, password_hash)
