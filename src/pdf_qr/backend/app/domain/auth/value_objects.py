from dataclasses import dataclass


@dataclass(frozen=True)
class AdminCredentials:
    username: str
    password_hash: str

    def __repr__(self) -> str:
        return f"AdminCredentials(username={self.username!r}, password_hash='***')"
