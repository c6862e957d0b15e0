"""Repository for Place model"""

from dataclasses import dataclass

from sqlalchemy import select, update

from mlc.errors.common import NotFoundError
from mlc.models.place import Place
from mlc.repository.base import BaseRepository


@dataclass(frozen=True, slots=True)
class PlaceCredentialDTO:
    id: int
    password_hash: bytes
    password_salt: str
    cash: int


class PlaceRepository(BaseRepository[Place]):
    model = Place

    def get_by_name(self, name: str, for_update: bool = False) -> Place:
        query = select(Place).where(Place.name == name)
        if for_update:
            query = query.with_for_update()
        db_obj = self.db.execute(query).scalar_one_or_none()
        if db_obj is None:
            raise NotFoundError(f"{self.model.__name__} {name=}")
        return db_obj

    def exists(self, name: str) -> bool:
        query = select(Place.id).where(Place.name == name)
        return self.db.execute(query).first() is not None

    def get_credential(self, name: str) -> PlaceCredentialDTO:
        row = self.db.execute(
            select(
                Place.id, Place.password_hash, Place.password_salt, Place.cash
            ).where(Place.name == name)
        ).first()
        if row is None:
            raise NotFoundError(f"{self.model.__name__} {name=}")
        return PlaceCredentialDTO(
            id=row.id,
            password_hash=row.password_hash,
            password_salt=row.password_salt,
            cash=row.cash,
        )

    def get_id(self, name: str) -> int:
        place_id = self.db.execute(
            select(Place.id).where(Place.name == name)
        ).scalar_one_or_none()
        if place_id is None:
            raise NotFoundError(f"{self.model.__name__} {name=}")
        return place_id

    def update_credential(self, name: str, password_hash: bytes, password_salt: str) -> None:
        result = self.db.execute(
            update(Place)
            .where(Place.name == name)
            .values(password_hash=password_hash, password_salt=password_salt)
        )
        if result.rowcount != 1:
            raise NotFoundError(f"{self.model.__name__} {name=}")

    def increment_cash(self, place_id: int, delta: int) -> None:
        result = self.db.execute(
            update(Place).where(Place.id == place_id).values(cash=Place.cash + delta)
        )
        self._expect_one(result.rowcount, place_id)

    def clear_cash(self, place_id: int) -> None:
        result = self.db.execute(
            update(Place).where(Place.id == place_id).values(cash=0)
        )
        self._expect_one(result.rowcount, place_id)
