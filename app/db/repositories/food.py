"""
Food repository.

Handles database operations for :class:`FoodItem`, including the
search filters used by the food browser.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.food import FoodItem


class FoodRepository:
    """Repository for FoodItem database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, item: FoodItem) -> FoodItem:
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def create_many(self, items: list[FoodItem]) -> None:
        self.session.add_all(items)
        self.session.commit()

    def get_by_id(self, item_id: int) -> Optional[FoodItem]:
        return self.session.get(FoodItem, item_id)

    def get_by_external_id(self, external_id: str) -> Optional[FoodItem]:
        statement = select(FoodItem).where(FoodItem.external_id == external_id)
        return self.session.exec(statement).first()

    def get_all(self) -> list[FoodItem]:
        statement = select(FoodItem).order_by(FoodItem.id)
        return list(self.session.exec(statement).all())

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        region: Optional[str] = None,
        supermarket: Optional[str] = None,
        limit: int = 20,
    ) -> list[FoodItem]:
        """Name substring (case-insensitive) plus exact category / region filters.

        ``supermarket`` is matched case-insensitively against the stored
        JSON list, so it is applied after the query.
        """
        statement = select(FoodItem)
        if query:
            statement = statement.where(func.lower(FoodItem.name).contains(query.lower()))
        if category:
            statement = statement.where(FoodItem.category == category)
        if region:
            statement = statement.where(FoodItem.region == region)
        statement = statement.order_by(FoodItem.name)
        if supermarket is None:
            return list(self.session.exec(statement.limit(limit)).all())

        wanted = supermarket.lower()
        items = [
            item for item in self.session.exec(statement).all()
            if any(s.lower() == wanted for s in item.supermarkets or [])
        ]
        return items[:limit]

    def get_categories(self) -> list[str]:
        statement = select(FoodItem.category).distinct().order_by(FoodItem.category)
        return list(self.session.exec(statement).all())

    def exists_with_prefix(self, prefix: str) -> bool:
        statement = select(FoodItem.id).where(FoodItem.external_id.startswith(prefix)).limit(1)
        return self.session.exec(statement).first() is not None

    def update(self, item: FoodItem) -> FoodItem:
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def delete(self, item_id: int) -> bool:
        item = self.get_by_id(item_id)
        if item:
            self.session.delete(item)
            self.session.commit()
            return True
        return False
