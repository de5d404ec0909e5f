from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class LoginInputDTO:
    username: Optional[str]
    password: Optional[str]


@dataclass
class LoginOutputDTO:
    username: str
    token: Optional[str] = None
    expires_at: Optional[datetime] = None


@dataclass
class SessionDTO:
    username: str
    expires_at: datetime
