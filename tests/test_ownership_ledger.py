import pytest

from pokecatch.errors import RecordNotFound, ValidationError
from pokecatch.models.sql_models import Pokemon, CaughtPokemon
from pokecatch.services import CredentialStore, OwnershipLedger


@pytest.fixture
def users(repo):
    store = CredentialStore(repo, hash_method='pbkdf2:sha256:1000')
    return store.register('ash@x.com', 'pw'), store.register('misty@x.com', 'pw')


def test_catch_creates_species_once_and_two_records(repo, users):
    ash, misty = users
    ledger = OwnershipLedger(repo)
    first = ledger.catch(ash, 'pikachu')
    second = ledger.catch(misty, 'pikachu')
    assert first.id != second.id
    assert first.pokemon_id == second.pokemon_id
    with repo.session() as s:
        assert s.query(Pokemon).filter(Pokemon.name == 'pikachu').count() == 1
        assert s.query(CaughtPokemon).count() == 2


def test_catch_requires_name(repo, users):
    ledger = OwnershipLedger(repo)
    for name in ('', '   ', None):
        with pytest.raises(ValidationError):
            ledger.catch(users[0], name)


def test_get_or_create_recovers_from_concurrent_insert(repo, monkeypatch):
    winner = repo.get_or_create_species('eevee')
    # pretend the first lookup missed so the insert collides with the existing row
    real_session = repo.session
    calls = {'n': 0}

    class MissingOnce:
        def __init__(self, s):
            self._s = s

        def __getattr__(self, item):
            return getattr(self._s, item)

        def __enter__(self):
            self._s.__enter__()
            return self

        def __exit__(self, *exc):
            return self._s.__exit__(*exc)

        def query(self, *args):
            q = self._s.query(*args)
            calls['n'] += 1
            if calls['n'] == 1:
                return q.filter(Pokemon.name == '__never__')
            return q

    monkeypatch.setattr(repo, 'session', lambda: MissingOnce(real_session()))
    species = repo.get_or_create_species('eevee')
    assert species.id == winner.id


def test_release_by_owner_deletes(repo, users):
    ash, _ = users
    ledger = OwnershipLedger(repo)
    record = ledger.catch(ash, 'bulbasaur')
    ledger.release(ash, record.id)
    assert ledger.list_caught(ash) == []


def test_release_by_other_user_keeps_record(repo, users):
    ash, misty = users
    ledger = OwnershipLedger(repo)
    record = ledger.catch(ash, 'bulbasaur')
    with pytest.raises(RecordNotFound):
        ledger.release(misty, record.id)
    assert [r.id for r in ledger.list_caught(ash)] == [record.id]


def test_release_unknown_record(repo, users):
    with pytest.raises(RecordNotFound):
        OwnershipLedger(repo).release(users[0], 'does-not-exist')


def test_list_caught_empty_is_empty_sequence(repo, users):
    assert OwnershipLedger(repo).list_caught(users[0]) == []


def test_list_caught_joins_species_and_filters_owner(repo, users):
    ash, misty = users
    ledger = OwnershipLedger(repo)
    ledger.catch(ash, 'charmander')
    ledger.catch(ash, 'squirtle')
    ledger.catch(misty, 'staryu')
    names = [r.pokemon.name for r in ledger.list_caught(ash)]
    assert names == ['charmander', 'squirtle']
    assert all(r.user_id == ash for r in ledger.list_caught(ash))
