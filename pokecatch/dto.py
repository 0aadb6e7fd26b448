from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any


@dataclass
class UserRecord:
    id: str
    email: str
    hashed_password: str


@dataclass
class Species:
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class CaughtRecord:
    id: str
    user_id: str
    pokemon_id: str
    created_at: Optional[datetime] = None
    # filled in by listings that join the species row
    pokemon: Optional[Species] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "user_id": self.user_id,
            "pokemon_id": self.pokemon_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if self.pokemon is not None:
            d["pokemon"] = self.pokemon.to_dict()
        return d
