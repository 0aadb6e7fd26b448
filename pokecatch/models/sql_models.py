import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = 'users'
    id = Column(String(36), primary_key=True, default=_new_id)
    # equality is case-sensitive; the unique index is the duplicate-email arbiter
    email = Column(String(320), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)


class Pokemon(Base):
    """A species, shared by every trainer that caught it."""
    __tablename__ = 'pokemon'
    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(200), unique=True, index=True, nullable=False)


class CaughtPokemon(Base):
    __tablename__ = 'caught_pokemon'
    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey('users.id'), index=True, nullable=False)
    pokemon_id = Column(String(36), ForeignKey('pokemon.id'), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    user = relationship('User', backref='caught_pokemon')
    pokemon = relationship('Pokemon')
