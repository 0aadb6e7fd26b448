import logging
from typing import Any, List

from werkzeug.security import generate_password_hash, check_password_hash

from .dto import CaughtRecord
from .errors import ValidationError, UserNotFound, PasswordMismatch, RecordNotFound

logger = logging.getLogger(__name__)


class CredentialStore:
    """Registers users and checks their passwords.

    Passwords are stored as salted werkzeug hashes (scrypt unless configured
    otherwise); the email column's unique index rejects duplicates.
    """

    def __init__(self, repo: Any, hash_method: str = 'scrypt'):
        self.repo = repo
        self.hash_method = hash_method

    def register(self, email: str, password: str) -> str:
        if not email or not password:
            raise ValidationError('email and password are required')
        pw_hash = generate_password_hash(password, method=self.hash_method)
        user = self.repo.create_user(email, pw_hash)
        logger.info('registered user %s', user.id)
        return user.id

    def verify(self, email: str, password: str) -> str:
        user = self.repo.get_user_by_email(email)
        if user is None:
            logger.info('login for unknown email')
            raise UserNotFound()
        if not check_password_hash(user.hashed_password, password or ''):
            logger.info('password mismatch for user %s', user.id)
            raise PasswordMismatch()
        return user.id


class OwnershipLedger:
    """Tracks which trainer caught which species.

    Releases are scoped to the caller: a record owned by someone else is
    reported exactly like a missing one.
    """

    def __init__(self, repo: Any):
        self.repo = repo

    def catch(self, user_id: str, species_name: str) -> CaughtRecord:
        if not species_name or not species_name.strip():
            raise ValidationError('Pokemon name is required')
        species = self.repo.get_or_create_species(species_name)
        record = self.repo.add_caught(user_id, species.id)
        logger.info('user %s caught %s (record %s)', user_id, species.name, record.id)
        return record

    def release(self, user_id: str, record_id: str) -> None:
        deleted = self.repo.delete_caught(user_id, record_id)
        if deleted == 0:
            raise RecordNotFound()
        logger.info('user %s released record %s', user_id, record_id)

    def list_caught(self, user_id: str) -> List[CaughtRecord]:
        return self.repo.list_caught(user_id)
