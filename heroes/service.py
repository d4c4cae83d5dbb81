"""
Business logic for hero operations.

Heroes live one per blob with no index, so every lookup scans the whole
container and decodes each document.
"""

import logging
import random
from typing import Callable, Iterator, List, Optional, Tuple
from shared.errors import DuplicateNameError, NotFoundError, SerializationError
from shared.storage import BlobStorageGateway, StorageGateway
from .models import Hero

logger = logging.getLogger(__name__)

MIN_GENERATED_ID = 10_000_000
MAX_GENERATED_ID = 99_999_999

# Ids that mean "no id supplied, allocate one"
PLACEHOLDER_IDS = (0, -1)


def random_hero_id() -> int:
    """Draw a uniformly random 8-digit id. Not checked against stored ids."""
    return random.randint(MIN_GENERATED_ID, MAX_GENERATED_ID)


class HeroService:
    """Service class for hero operations."""

    def __init__(
        self,
        gateway: Optional[StorageGateway] = None,
        id_generator: Callable[[], int] = random_hero_id
    ):
        self.gateway = gateway if gateway is not None else BlobStorageGateway()
        self.id_generator = id_generator

    def _scan(self) -> Iterator[Tuple[str, Hero]]:
        """Yield (blob key, hero) for every stored blob, in listing order."""
        for blob in self.gateway.list_keys():
            key = blob.name
            payload = self.gateway.read_bytes(key)
            try:
                hero = Hero.from_json(payload)
            except SerializationError as e:
                logger.error(f"Malformed hero document {key}: {str(e)}")
                raise SerializationError(f"Blob '{key}': {str(e)}") from e
            yield key, hero

    def list_heroes(self) -> List[Hero]:
        """
        List every stored hero.

        Returns:
            One hero per blob, in the container's listing order

        Raises:
            SerializationError: If any stored document is malformed; no
                partial list is returned
        """
        return [hero for _, hero in self._scan()]

    def get_hero(self, hero_id: int) -> Hero:
        """
        Get the first stored hero with the given id.

        Raises:
            NotFoundError: If no stored hero has that id
        """
        for _, hero in self._scan():
            if hero.id == hero_id:
                return hero
        raise NotFoundError(f"Hero {hero_id} not found")

    def create_hero(self, new_hero: Hero, id_override: Optional[int] = None) -> Hero:
        """
        Store a new hero.

        Args:
            new_hero: Hero to store; its id is replaced when a placeholder
            id_override: Id that takes precedence over new_hero.id

        Returns:
            The stored hero with its final id

        Raises:
            DuplicateNameError: If a stored hero already has this name
            BlobExistsError: If a blob for the final id already exists
        """
        if id_override is not None:
            new_hero.id = id_override

        if any(hero == new_hero for hero in self.list_heroes()):
            raise DuplicateNameError(new_hero.name)

        if new_hero.id in PLACEHOLDER_IDS:
            new_hero.id = self.id_generator()
            logger.info(f"No id supplied for hero '{new_hero.name}', using random id {new_hero.id}")

        self.gateway.write_bytes(new_hero.blob_key, new_hero.to_json(), overwrite=False)
        logger.info(f"Created hero {new_hero.id}")
        return new_hero

    def update_hero(self, updated_hero: Hero) -> bool:
        """
        Replace the first stored hero whose id matches.

        The whole document is overwritten; the name is not re-checked for
        duplicates.

        Returns:
            True if a matching hero was found and replaced
        """
        for key, hero in self._scan():
            if hero.id == updated_hero.id:
                self.gateway.write_bytes(key, updated_hero.to_json(), overwrite=True)
                logger.info(f"Updated hero {updated_hero.id}")
                return True
        return False

    def delete_hero(self, hero_id: int) -> bool:
        """
        Delete the first stored hero with the given id.

        Returns:
            True if deleted, False if no stored hero has that id
        """
        logger.info(f"Delete hero by id {hero_id}")
        for key, hero in self._scan():
            if hero.id == hero_id:
                self.gateway.delete_key(key)
                return True
        return False
