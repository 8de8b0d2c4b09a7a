"""The fixed demo data set: users, tags and the events referencing them."""
from pathlib import Path
from typing import Dict, List, Optional, Union

import orjson
from pydantic import BaseModel

from .errors import CatalogError

DEFAULT_PATH = Path(__file__).parent / "data" / "seed.json"


class EventSeed(BaseModel):
    author: str
    title: str
    description: str = ""
    tags: List[str] = []
    with_attendance: bool = False
    images: List[str] = []


class Catalog(BaseModel):
    # user handle -> display name
    users: Dict[str, str]
    # tag name -> aliases
    tags: Dict[str, List[str]]
    events: List[EventSeed] = []

    def check_references(self) -> None:
        for i, event in enumerate(self.events):
            if event.author not in self.users:
                raise CatalogError(f"event #{i} {event.title!r}: unknown author {event.author!r}")
            unknown = [t for t in event.tags if t not in self.tags]
            if unknown:
                raise CatalogError(f"event #{i} {event.title!r}: unknown tags {unknown}")


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    with open(path or DEFAULT_PATH, "rb") as f:
        catalog = Catalog.model_validate(orjson.loads(f.read()))
    catalog.check_references()
    return catalog
