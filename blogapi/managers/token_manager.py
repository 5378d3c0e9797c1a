"""Token manager for issuing and validating JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import JWTError, jwt

from blogapi.configs import settings
from blogapi.errors import InvalidTokenError, MissingTokenError
from blogapi.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new access token.

    Args:
        user_id: User's UUID, stored as the subject
        email: User's email
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(user_id),
        "email": email,
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> TokenData | None:
    """
    Decode and validate an access token.

    Signature, expiry, issuer, audience and token type are all checked.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: Decoded token data or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError:
        return None

    subject: str | None = payload.get("sub")
    email: str | None = payload.get("email")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not subject or not email or not jti or token_type != ACCESS_TOKEN_TYPE:
        return None

    try:
        user_id = UUID(subject)
    except ValueError:
        return None

    return TokenData(user_id=user_id, email=email, jti=jti, token_type=token_type)


def verify_bearer(token: str | None) -> UUID:
    """
    Resolve a bearer token to the user id it was issued for.

    Args:
        token: Raw bearer token, or None when the header was absent

    Returns:
        UUID: The embedded user id

    Raises:
        MissingTokenError: If no token was sent
        InvalidTokenError: If the token does not validate
    """
    if not token:
        raise MissingTokenError
    token_data = decode_access_token(token)
    if token_data is None:
        raise InvalidTokenError
    return token_data.user_id
