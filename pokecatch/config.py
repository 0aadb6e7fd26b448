import os
from typing import List


class Config:
    # Signing secrets are never compiled into source. JWT_SECRET signs new
    # tokens; JWT_PREVIOUS_SECRETS (comma-separated) are still accepted when
    # verifying so a secret can be rotated without logging everybody out.
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    DATA_DIR = os.path.join(BASE_DIR, 'data')

    def __init__(self, **overrides):
        default_db = 'sqlite:///' + os.path.join(self.DATA_DIR, 'pokecatch.db')
        self.DATABASE_URL = os.getenv('DATABASE_URL') or default_db
        self.JWT_SECRET = os.getenv('JWT_SECRET')
        self.JWT_PREVIOUS_SECRETS = _split_csv(os.getenv('JWT_PREVIOUS_SECRETS', ''))
        self.ACCESS_TOKEN_EXP = int(os.getenv('ACCESS_TOKEN_EXP', '3600'))
        self.PASSWORD_HASH_METHOD = os.getenv('PASSWORD_HASH_METHOD', 'scrypt')
        self.POKEAPI_BASE_URL = os.getenv('POKEAPI_BASE_URL', 'https://pokeapi.co/api/v2')
        self.POKEAPI_TIMEOUT = float(os.getenv('POKEAPI_TIMEOUT', '10'))
        # 409 by default; set to 200 to keep the legacy "already exists" success reply
        self.DUPLICATE_EMAIL_STATUS = int(os.getenv('DUPLICATE_EMAIL_STATUS', '409'))
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f'Unknown config option: {key}')
            setattr(self, key, value)

    @property
    def signing_secrets(self) -> List[str]:
        """Current secret first, followed by the ones still accepted for verification."""
        secrets = [self.JWT_SECRET] if self.JWT_SECRET else []
        return secrets + [s for s in self.JWT_PREVIOUS_SECRETS if s and s not in secrets]


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


def get_config(**overrides) -> Config:
    return Config(**overrides)
