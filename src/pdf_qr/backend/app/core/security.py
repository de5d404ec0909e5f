# app/core/security.py
from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class BcryptPasswordHasher:
    def hash(self, raw_password: str) -> str:
        return pwd_context.hash(raw_password)

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        try:
            return pwd_context.verify(raw_password, hashed_password)
        except ValueError:
            # malformed or non-bcrypt hash in configuration
            return False
