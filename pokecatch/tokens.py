"""Signed, time-limited bearer tokens (HS256 JWTs via PyJWT).

Tokens carry the user id in ``sub`` and an absolute ``exp``. New tokens
are signed with the first configured secret; verification accepts any
configured secret so the signing key can be rotated.
"""
import logging
import time
from typing import Callable, Iterable

import jwt

from .errors import InvalidToken, ExpiredToken

logger = logging.getLogger(__name__)

ALGORITHM = 'HS256'


class TokenService:

    def __init__(self, secrets: Iterable[str], ttl_seconds: int = 3600,
                 clock: Callable[[], float] = time.time):
        self.secrets = [s for s in secrets if s]
        if not self.secrets:
            raise RuntimeError('JWT_SECRET is not configured; refusing to sign tokens without a secret')
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, user_id: str) -> str:
        now = int(self._clock())
        payload = {'sub': str(user_id), 'iat': now, 'exp': now + self.ttl_seconds}
        return jwt.encode(payload, self.secrets[0], algorithm=ALGORITHM)

    def verify(self, token: str) -> str:
        """Return the subject of a token whose signature and expiry both check out."""
        if not token:
            raise InvalidToken()
        payload = None
        for secret in self.secrets:
            try:
                # only signature and expiry decide validity; expiry uses our own clock below
                payload = jwt.decode(token, secret, algorithms=[ALGORITHM],
                                     options={'verify_exp': False, 'verify_iat': False, 'verify_nbf': False,
                                              'require': ['sub', 'exp']})
                break
            except jwt.InvalidSignatureError:
                continue
            except jwt.InvalidTokenError as e:
                logger.debug('rejected malformed token: %s', e)
                raise InvalidToken()
        if payload is None:
            logger.debug('rejected token with unknown signature')
            raise InvalidToken()

        try:
            exp = float(payload['exp'])
        except (TypeError, ValueError):
            raise InvalidToken()
        if self._clock() >= exp:
            raise ExpiredToken()
        return payload['sub']
