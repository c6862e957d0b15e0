"""Place service. Provisioning, passwords and the cash float."""

import logging

from fastapi import Depends

from mlc.errors.auth import InvalidCredentials
from mlc.errors.place import InvalidPlaceName, PlaceAlreadyExists
from mlc.models.place import Place
from mlc.repository.place import PlaceRepository
from mlc.services.password import PasswordHasher
from mlc.uow import UnitOfWork

logger = logging.getLogger(__name__)


class PlaceService:
    MAX_NAME_LENGTH = 64

    def __init__(self, place_repository: PlaceRepository = Depends()):
        self._place_repository = place_repository

    def _check_name(self, name: str) -> None:
        if not name or name != name.strip():
            raise InvalidPlaceName("empty or padded with spaces")
        if len(name) > self.MAX_NAME_LENGTH:
            raise InvalidPlaceName(f"longer than {self.MAX_NAME_LENGTH} characters")
        if ";" in name:
            raise InvalidPlaceName("';' is not allowed")

    def create(self, name: str, password: str) -> Place:
        """Provision a new place. There is no self-service signup."""
        self._check_name(name)
        password_hash, password_salt = PasswordHasher.new_credential(password)
        with UnitOfWork(self._place_repository.db):
            if self._place_repository.exists(name):
                raise PlaceAlreadyExists(name)
            place = self._place_repository.create(
                Place(name=name, password_hash=password_hash, password_salt=password_salt)
            )
        logger.info("Added place %r with id %s", name, place.id)
        return place

    def get(self, name: str) -> Place:
        return self._place_repository.get_by_name(name)

    def set_password(self, name: str, password: str) -> None:
        password_hash, password_salt = PasswordHasher.new_credential(password)
        with UnitOfWork(self._place_repository.db):
            self._place_repository.update_credential(name, password_hash, password_salt)
        logger.info("Password of place %r changed", name)

    def change_password(self, name: str, current_password: str, new_password: str) -> None:
        credential = self._place_repository.get_credential(name)
        if not PasswordHasher.verify(
            current_password, credential.password_hash, credential.password_salt
        ):
            raise InvalidCredentials
        self.set_password(name, new_password)

    def clear_cash(self, name: str) -> int:
        """Zero the cash float of a place. Returns the collected amount."""
        with UnitOfWork(self._place_repository.db):
            place = self._place_repository.get_by_name(name, for_update=True)
            collected = place.cash
            self._place_repository.clear_cash(place.id)
        logger.info("Collected %d from the cash float of place %r", collected, name)
        return collected
