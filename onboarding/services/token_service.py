import uuid
from datetime import datetime, timedelta

from jose import JWTError, jwt

from onboarding.config import settings
from onboarding.exceptions import InvalidToken


class TokenService:
    """Issues and validates signed bearer tokens bound to a user's email."""

    def __init__(
        self,
        secret: str = settings.JWT_SECRET,
        algorithm: str = settings.ALGORITHM,
        expire_minutes: int = settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, identity: str, expires_delta: timedelta | None = None) -> str:
        now = datetime.utcnow()
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        claims = {
            "sub": identity,
            "type": "access",
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidToken("Invalid or expired token")

        if not payload.get("sub"):
            raise InvalidToken("Invalid token payload")
        if payload.get("type", "access") != "access":
            raise InvalidToken("Invalid token type")
        return payload
