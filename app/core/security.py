"""Password hashing and Basic credential parsing."""
import base64
import binascii

from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from passlib.context import CryptContext

from app.core.config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend roughly one verify's worth of time when there is no hash to check."""
    pwd_context.dummy_verify()


# Authorization: Basic base64(login:secret)
def parse_basic_credentials(authorization: str | None) -> HTTPBasicCredentials | None:
    """Return login/secret from a Basic Authorization header; None if absent or malformed."""
    if not authorization:
        return None
    scheme, param = get_authorization_scheme_param(authorization)
    if scheme.lower() != "basic" or not param:
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (ValueError, binascii.Error):
        return None
    login, sep, secret = decoded.partition(":")
    if not sep:
        return None
    return HTTPBasicCredentials(username=login, password=secret)
