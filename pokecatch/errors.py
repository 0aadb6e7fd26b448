"""Error taxonomy shared by the core components and the HTTP layer.

Components raise these; ``PokeApp`` turns them into ``{"message": ...}``
responses using ``status_code``.
"""


class CatchError(Exception):
    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatchError):
    status_code = 400
    default_message = 'Invalid request'


class AuthError(CatchError):
    status_code = 401
    default_message = 'Unauthorized'


class NotFoundError(CatchError):
    status_code = 404
    default_message = 'Not found'


class ConflictError(CatchError):
    status_code = 409
    default_message = 'Conflict'


class UpstreamError(CatchError):
    status_code = 500
    default_message = 'An error occurred while fetching the Pokémon data'


class DuplicateEmail(ConflictError):
    default_message = 'Email already exists'


class UserNotFound(NotFoundError):
    default_message = 'User not found'


class PasswordMismatch(AuthError):
    default_message = 'Invalid credentials'


class InvalidToken(AuthError):
    default_message = 'Unauthorized'


class ExpiredToken(AuthError):
    default_message = 'Token expired'


class RecordNotFound(NotFoundError):
    default_message = 'Pokemon not found or not owned by user'


class SpeciesNotFound(NotFoundError):
    default_message = 'Your Pokémon was not found!'
