"""Password hashing for user credentials.

Only salted hashes are stored. ``verify_password`` answers the same question
as an exact comparison with the registered password.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(candidate, password_hash) -> bool:
    if not isinstance(candidate, str) or not password_hash:
        return False
    return pwd_context.verify(candidate, password_hash)
