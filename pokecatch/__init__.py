"""PokeCatch backend package.

Exposes the Flask application factory so WSGI servers and tests can do
``from pokecatch import create_app``.
"""

from .PokeApp import create_app

__all__ = ["create_app"]
