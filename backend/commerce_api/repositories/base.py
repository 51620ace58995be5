"""
Generic Repository - CRUD and paged queries over one mapped entity

Predicates are SQLAlchemy boolean expressions (``Product.price >= 10``),
so filtering, counting, sorting and paging all run in the database.
They compose with AND through all_of().

Author: TM3
"""
import logging
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import and_, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

Predicate = ColumnElement[bool]


def all_of(*conditions: Optional[Predicate]) -> Optional[Predicate]:
    """
    AND-combine the conditions that are present

    Returns:
        None when no condition is given (meaning: match everything),
        the condition itself when there is one, and_(...) otherwise
    """
    present = [condition for condition in conditions if condition is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


class Repository(Generic[ModelT]):
    """
    Repository for one entity type identified by an integer ``id``

    Writes (add/update/delete) only stage changes on the session; they
    become durable when the owning UnitOfWork saves.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession, model: Optional[Type[ModelT]] = None):
        self.session = session
        if model is not None:
            self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Find entity by ID

        Returns:
            Entity or None if not found
        """
        return await self.session.get(self.model, entity_id)

    async def get_all(self) -> List[ModelT]:
        """All rows, in the store's natural order"""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def find(self, predicate: Predicate) -> List[ModelT]:
        """All rows matching predicate"""
        result = await self.session.execute(select(self.model).where(predicate))
        return list(result.scalars().all())

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        predicate: Optional[Predicate] = None,
        order_by: Optional[ColumnElement] = None,
        ascending: bool = True,
    ) -> Tuple[List[ModelT], int]:
        """
        Filtered, sorted page of entities

        Order of operations: filter -> count -> sort -> skip/take. The
        count covers the whole filtered set, so asking for a page past the
        end returns no items but the real total.

        Args:
            page_number: 1-based page number
            page_size: Maximum items to return
            predicate: Filter (None = all rows)
            order_by: Sort column (None = id)
            ascending: Sort direction, applied to order_by or to id when order_by is None

        Returns:
            Tuple of (list of entities, total count)
        """
        if page_number < 1 or page_size < 1:
            raise ValueError("page_number and page_size must be >= 1")

        stmt = select(self.model)
        if predicate is not None:
            stmt = stmt.where(predicate)

        # Get total count
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total_count = (await self.session.execute(count_stmt)).scalar_one()

        id_column = self.model.id
        sort_key = order_by if order_by is not None else id_column
        ordering = [sort_key.asc() if ascending else sort_key.desc()]
        if sort_key is not id_column:
            # id breaks ties so pages never overlap
            ordering.append(id_column.asc())

        stmt = (
            stmt.order_by(*ordering)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        items = list(result.scalars().all())

        logger.debug(
            f"{self.model.__name__} page {page_number} (size {page_size}): "
            f"{len(items)} of {total_count}"
        )
        return items, total_count

    async def add(self, entity: ModelT) -> ModelT:
        """Stage a new entity; its id is assigned when the unit of work saves"""
        self.session.add(entity)
        return entity

    async def update(self, entity: ModelT) -> None:
        """Mark a loaded entity as modified for the next save"""
        self.session.add(entity)

    async def delete(self, entity: ModelT) -> None:
        """Stage removal of entity"""
        await self.session.delete(entity)

    async def exists(self, entity_id: int) -> bool:
        stmt = select(exists().where(self.model.id == entity_id))
        return bool((await self.session.execute(stmt)).scalar())

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        """
        Count entities matching predicate

        Returns:
            Count of matching entities (all rows when predicate is None)
        """
        stmt = select(func.count()).select_from(self.model)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return (await self.session.execute(stmt)).scalar_one()
