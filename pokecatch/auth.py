import logging

from flask import current_app, g, request

from .errors import InvalidToken

logger = logging.getLogger(__name__)


def bearer_token() -> str:
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise InvalidToken()
    return token.strip()


def require_token():
    """before_request hook: resolve the caller's user id into `g.user_id`."""
    if request.method == 'OPTIONS':
        # CORS preflight carries no credentials
        return None
    tokens = current_app.extensions['pokecatch'].tokens
    g.user_id = tokens.verify(bearer_token())
    return None
