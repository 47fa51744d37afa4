"""Password hashing for user signup"""

from passlib.context import CryptContext

BCRYPT_MAX_BYTES = 72


class AuthService:
    def __init__(self, rounds: int = 12):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    @staticmethod
    def _truncate(password: str) -> str:
        # bcrypt has a 72 byte limit, truncate if necessary
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            password = password_bytes[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
        return password

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(self._truncate(password))

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(self._truncate(plain_password), hashed_password)
