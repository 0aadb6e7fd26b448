from unittest.mock import Mock

import pytest
import requests

from pokecatch.errors import SpeciesNotFound, UpstreamError
from pokecatch.pokeapi import SpeciesLookup


def _session(status=200, body=None, exc=None):
    session = Mock()
    if exc is not None:
        session.get.side_effect = exc
    else:
        resp = Mock(status_code=status)
        resp.json.return_value = body if body is not None else {}
        session.get.return_value = resp
    return session


def test_lookup_returns_upstream_json_with_timeout():
    session = _session(body={'name': 'pikachu', 'id': 25})
    lookup = SpeciesLookup('https://pokeapi.test/api/v2/', timeout=3, session=session)
    assert lookup.lookup('pikachu') == {'name': 'pikachu', 'id': 25}
    session.get.assert_called_once_with('https://pokeapi.test/api/v2/pokemon/pikachu', timeout=3)


def test_name_is_url_quoted():
    session = _session(body={})
    SpeciesLookup('https://pokeapi.test', session=session).lookup('mr mime/x')
    assert session.get.call_args[0][0] == 'https://pokeapi.test/pokemon/mr%20mime%2Fx'


def test_upstream_404_is_not_found():
    with pytest.raises(SpeciesNotFound):
        SpeciesLookup(session=_session(status=404)).lookup('missingno')


@pytest.mark.parametrize('status', [400, 500, 503, 301])
def test_other_statuses_are_upstream_errors(status):
    with pytest.raises(UpstreamError):
        SpeciesLookup(session=_session(status=status)).lookup('pikachu')


def test_network_failure_is_upstream_error():
    session = _session(exc=requests.ConnectionError('boom'))
    with pytest.raises(UpstreamError):
        SpeciesLookup(session=session).lookup('pikachu')


def test_timeout_is_upstream_error():
    session = _session(exc=requests.Timeout('slow'))
    with pytest.raises(UpstreamError):
        SpeciesLookup(session=session).lookup('pikachu')


def test_non_json_body_is_upstream_error():
    session = _session()
    session.get.return_value.json.side_effect = ValueError('no json')
    with pytest.raises(UpstreamError):
        SpeciesLookup(session=session).lookup('pikachu')
