import logging
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models.sql_models import Base, User, Pokemon, CaughtPokemon
from ..dto import UserRecord, Species, CaughtRecord
from ..errors import DuplicateEmail

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """Storage handle backed by SQLAlchemy.

    The instance owns the engine (and so the connection pool) for its whole
    lifetime; every method acquires a session and releases it before
    returning. Call `close()` to dispose of the pool.
    """

    def __init__(self, db_url: str):
        if db_url.startswith('sqlite:'):
            # an in-memory database only exists on one connection, share it
            if ':memory:' in db_url or db_url.rstrip('/') == 'sqlite:':
                self.engine = create_engine(db_url, connect_args={"check_same_thread": False},
                                            poolclass=StaticPool)
            else:
                self.engine = create_engine(db_url, connect_args={"check_same_thread": False})
        else:
            self.engine = create_engine(db_url, pool_pre_ping=True)

        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def session(self) -> Session:
        return self.Session()

    def close(self) -> None:
        self.engine.dispose()

    # --- users ---

    def create_user(self, email: str, hashed_password: str) -> UserRecord:
        with self.session() as s:
            user = User(email=email, hashed_password=hashed_password)
            s.add(user)
            try:
                s.commit()
            except IntegrityError:
                s.rollback()
                raise DuplicateEmail()
            return _user_record(user)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self.session() as s:
            user = s.query(User).filter(User.email == email).one_or_none()
            return _user_record(user) if user is not None else None

    # --- species ---

    def get_or_create_species(self, name: str) -> Species:
        """Return the species called `name`, inserting it on first sight.

        The unique index on the name decides concurrent inserts: the losing
        writer rolls back and reads the winner's row.
        """
        with self.session() as s:
            row = s.query(Pokemon).filter(Pokemon.name == name).one_or_none()
            if row is not None:
                return Species(id=row.id, name=row.name)
            row = Pokemon(name=name)
            s.add(row)
            try:
                s.commit()
            except IntegrityError:
                s.rollback()
                logger.debug('species %r inserted concurrently, re-reading', name)
                row = s.query(Pokemon).filter(Pokemon.name == name).one()
            return Species(id=row.id, name=row.name)

    # --- caught records ---

    def add_caught(self, user_id: str, pokemon_id: str) -> CaughtRecord:
        with self.session() as s:
            model = CaughtPokemon(user_id=user_id, pokemon_id=pokemon_id)
            s.add(model)
            s.commit()
            return CaughtRecord(id=model.id, user_id=model.user_id,
                                pokemon_id=model.pokemon_id, created_at=model.created_at)

    def delete_caught(self, user_id: str, record_id: str) -> int:
        """Delete a record only when both id and owner match. Returns rows deleted."""
        with self.session() as s:
            count = (s.query(CaughtPokemon)
                     .filter(CaughtPokemon.id == record_id, CaughtPokemon.user_id == user_id)
                     .delete(synchronize_session=False))
            s.commit()
            return count

    def list_caught(self, user_id: str) -> List[CaughtRecord]:
        with self.session() as s:
            rows = (s.query(CaughtPokemon, Pokemon)
                    .join(Pokemon, CaughtPokemon.pokemon_id == Pokemon.id)
                    .filter(CaughtPokemon.user_id == user_id)
                    .order_by(CaughtPokemon.created_at, CaughtPokemon.id)
                    .all())
            return [CaughtRecord(id=c.id, user_id=c.user_id, pokemon_id=c.pokemon_id,
                                 created_at=c.created_at, pokemon=Species(id=p.id, name=p.name))
                    for c, p in rows]


def _user_record(user: User) -> UserRecord:
    return UserRecord(id=user.id, email=user.email, hashed_password=user.hashed_password)
