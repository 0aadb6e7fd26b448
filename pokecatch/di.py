"""
Composition root for the PokeCatch backend.
Builds config, the storage handle and every service in one place so tests
can assemble a container around an in-memory database or fake collaborators.
"""
from typing import Optional

from .config import Config, get_config
from .repositories.sqlalchemy_repo import SQLAlchemyRepository
from .tokens import TokenService
from .services import CredentialStore, OwnershipLedger
from .pokeapi import SpeciesLookup


class Container:
    def __init__(self, cfg: Config, species_lookup: Optional[SpeciesLookup] = None):
        self.cfg = cfg
        self.tokens = TokenService(cfg.signing_secrets, ttl_seconds=cfg.ACCESS_TOKEN_EXP)
        self.repo = SQLAlchemyRepository(cfg.DATABASE_URL)
        self.credentials = CredentialStore(self.repo, hash_method=cfg.PASSWORD_HASH_METHOD)
        self.ledger = OwnershipLedger(self.repo)
        self.species_lookup = species_lookup or SpeciesLookup(cfg.POKEAPI_BASE_URL, timeout=cfg.POKEAPI_TIMEOUT)

    def close(self) -> None:
        self.species_lookup.close()
        self.repo.close()


def build_container(cfg: Optional[Config] = None, species_lookup: Optional[SpeciesLookup] = None) -> Container:
    return Container(cfg or get_config(), species_lookup=species_lookup)
