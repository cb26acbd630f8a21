"""
JSON file record store
Each collection lives in one file holding the whole array; every mutation rewrites the file
"""
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from .ids import IdAllocator

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

USERS_FILENAME = "users.json"
ART_FILENAME = "art.json"

SEED_ARTWORKS: List[Record] = [
    {
        "id": 1,
        "title": "Cyber Punk City",
        "artist": "Demo Artist",
        "price": 2400,
        "category": "Digital",
        "img": "https://images.unsplash.com/photo-1550684848-fac1c5b4e853?w=800",
    },
    {
        "id": 2,
        "title": "Abstract Blue",
        "artist": "Demo Artist",
        "price": 1200,
        "category": "Painting",
        "img": "https://images.unsplash.com/photo-1541963463532-d68292c34b19?w=800",
    },
]


class RecordNotFoundError(LookupError):
    """Raised when a record id matches nothing in its collection"""


class JsonCollection:
    """One collection persisted as a JSON array in a single file"""

    def __init__(self, path: Path):
        self.path = Path(path)
        # held across read-mutate-write so two requests in this process cannot interleave
        self.lock = threading.RLock()

    def read(self) -> List[Record]:
        """
        Load the whole collection

        Returns:
            Records in storage order, or an empty list if the file is missing,
            unreadable or does not hold a JSON array of objects
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path.name}, treating as empty: {e}")
            return []

        if not isinstance(records, list):
            logger.warning(f"{self.path.name} does not hold a JSON array, treating as empty")
            return []

        if not all(isinstance(record, dict) for record in records):
            logger.warning(f"{self.path.name} holds non-object entries, treating as empty")
            return []

        return records

    def write(self, records: List[Record]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)

    def ensure(self, seed: List[Record]) -> bool:
        """Write the seed records if the file does not exist yet. Returns True if it was created."""
        with self.lock:
            if self.path.exists():
                return False
            self.write(seed)
            return True


class RecordStore:
    """
    Users and artworks, each in its own JSON file

    The two collections are independent; nothing keeps them consistent with each other.
    """

    def __init__(self, data_dir: Path, id_allocator: Optional[IdAllocator] = None):
        self.data_dir = Path(data_dir)
        self.users = JsonCollection(self.data_dir / USERS_FILENAME)
        self.artworks = JsonCollection(self.data_dir / ART_FILENAME)
        self.ids = id_allocator or IdAllocator()

    def initialize(self) -> None:
        """Create the data directory and any missing collection file"""
        self.data_dir.mkdir(parents=True, exist_ok=True)

        if self.users.ensure([]):
            logger.info(f"Created empty user collection at {self.users.path}")

        if self.artworks.ensure([dict(art) for art in SEED_ARTWORKS]):
            logger.info(f"Seeded artwork collection at {self.artworks.path}")

    # Users

    def list_users(self) -> List[Record]:
        return self.users.read()

    def insert_user(self, fields: Record) -> Record:
        """Append a user with a fresh id. Any id in fields is overwritten."""
        with self.users.lock:
            users = self.users.read()
            user = {**fields, "id": self.ids.next_id()}
            users.append(user)
            self.users.write(users)

        logger.info(f"User created: {user.get('email')} (ID: {user['id']})")
        return user

    def update_user(self, user_id: Optional[int], fields: Record) -> Record:
        """
        Shallow-merge fields over an existing user

        Args:
            user_id: Id to look up; None matches nothing
            fields: Keys to overwrite, all others are kept. An "id" key is merged like any other.

        Returns:
            The updated user record

        Raises:
            RecordNotFoundError: If no user has this id. The file is left untouched.
        """
        with self.users.lock:
            users = self.users.read()
            index = _find_index(users, user_id)
            if index is None:
                raise RecordNotFoundError("User not found")

            users[index] = {**users[index], **fields}
            self.users.write(users)
            updated = users[index]

        logger.info(f"User updated: {updated.get('email')} (ID: {user_id})")
        return updated

    # Artworks

    def list_artworks(self) -> List[Record]:
        return self.artworks.read()

    def insert_artwork(self, fields: Record) -> Record:
        """Prepend an artwork with a fresh id so the newest upload comes first"""
        with self.artworks.lock:
            artworks = self.artworks.read()
            artwork = {**fields, "id": self.ids.next_id()}
            artworks.insert(0, artwork)
            self.artworks.write(artworks)

        logger.info(f"Artwork created: {artwork.get('title')} (ID: {artwork['id']})")
        return artwork

    def delete_artwork(self, artwork_id: Optional[int]) -> None:
        # rewrites even when nothing matched
        with self.artworks.lock:
            artworks = self.artworks.read()
            remaining = [art for art in artworks if not _id_matches(art, artwork_id)]
            self.artworks.write(remaining)

        removed = len(artworks) - len(remaining)
        logger.info(f"Artwork delete requested (ID: {artwork_id}), {removed} removed")


def _id_matches(record: Record, record_id: Optional[int]) -> bool:
    if record_id is None:
        return False
    value = record.get("id")
    # bools are ints in Python but never equal a numeric id on the wire
    return not isinstance(value, bool) and isinstance(value, (int, float)) and value == record_id


def _find_index(records: List[Record], record_id: Optional[int]) -> Optional[int]:
    for index, record in enumerate(records):
        if _id_matches(record, record_id):
            return index
    return None
