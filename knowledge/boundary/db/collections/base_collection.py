"""
Base collection operations for SQLAlchemy models.

Provides a document-collection style interface (insert, find with
filter/sort/limit, replace one, delete one/many) over a single table.
Filters are equality mappings from field name to value.

Dependencies: sqlalchemy
System role: Foundation for document collection access
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from knowledge.boundary.db.base import Base
from knowledge.boundary.db.connection import get_async_session_factory
from knowledge.core.exceptions import BackendFailureError

ModelT = TypeVar("ModelT", bound=Base)

ASCENDING = 1
DESCENDING = -1

Filter = Mapping[str, Any]
Sort = Sequence[tuple[str, int]]


class BaseCollection(Generic[ModelT]):
    """
    Generic collection over one SQLAlchemy model.

    Every operation runs in its own session and transaction, so each
    call is atomic on its own and nothing is shared between calls
    except the engine. SQLAlchemy errors are wrapped in
    BackendFailureError; IntegrityError is re-raised untouched so
    subclasses can translate it.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        fields: Names of the columns usable in filters and sorts
        engine: Async engine owning the connection pool
    """

    def __init__(
        self,
        model: type[ModelT],
        engine: AsyncEngine,
        fields: Sequence[str],
    ) -> None:
        """
        Initialize collection with target model and engine.

        Args:
            model: SQLAlchemy model class for database operations
            engine: Async engine (owned by the caller until dispose())
            fields: Column names allowed in filters and sorts
        """
        self.model = model
        self.engine = engine
        self.fields = tuple(fields)
        self.session_factory = get_async_session_factory(engine)

    def _column(self, field: str):
        if field not in self.fields:
            raise ValueError(f"Unknown field for {self.model.__name__}: {field}")
        return getattr(self.model, field)

    def _where(self, filter: Filter) -> list:
        return [self._column(field) == value for field, value in filter.items()]

    def _order_by(self, sort: Sort | None) -> list:
        if not sort:
            return [self.model.id.asc()]
        clauses = []
        for field, direction in sort:
            if direction not in (ASCENDING, DESCENDING):
                raise ValueError(f"Sort direction must be 1 or -1, got {direction}")
            column = self._column(field)
            clauses.append(column.asc() if direction == ASCENDING else column.desc())
        return clauses

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session, session.begin():
                yield session
        except IntegrityError:
            raise
        except SQLAlchemyError as exc:
            raise BackendFailureError(
                f"Collection {operation} failed: {exc}",
                operation=operation,
                details={"table": self.model.__tablename__},
            ) from exc

    async def insert_row(self, **values: Any) -> ModelT:
        """
        Insert a new row.

        Args:
            **values: Model field values

        Returns:
            Created model instance with generated ID and timestamps

        Raises:
            IntegrityError: If a unique constraint rejects the row
            BackendFailureError: On any other database error
        """
        instance = self.model(**values)
        async with self._transaction("insert") as session:
            session.add(instance)
        return instance

    async def find_rows(
        self,
        filter: Filter,
        sort: Sort | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        """
        Retrieve rows matching an equality filter.

        Args:
            filter: Field/value pairs that must all match
            sort: (field, ASCENDING | DESCENDING) pairs, insertion order if omitted
            limit: Maximum number of rows to return (None for all)

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).where(*self._where(filter)).order_by(*self._order_by(sort))
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self._transaction("find") as session:
            result = await session.execute(stmt)
            return result.scalars().all()

    async def replace_one_row(self, filter: Filter, **values: Any) -> int:
        """
        Overwrite the first row matching filter.

        Args:
            filter: Field/value pairs that must all match
            **values: New field values

        Returns:
            Number of rows matched (0 or 1)
        """
        match = select(self.model.id).where(*self._where(filter)).order_by(self.model.id).limit(1)
        async with self._transaction("replace_one") as session:
            row_id = (await session.execute(match)).scalar_one_or_none()
            if row_id is None:
                return 0
            await session.execute(
                update(self.model).where(self.model.id == row_id).values(**values)
            )
            return 1

    async def delete_one(self, filter: Filter) -> int:
        """
        Delete the first row matching filter.

        Args:
            filter: Field/value pairs that must all match

        Returns:
            Number of rows deleted (0 or 1)
        """
        match = select(self.model.id).where(*self._where(filter)).order_by(self.model.id).limit(1)
        async with self._transaction("delete_one") as session:
            row_id = (await session.execute(match)).scalar_one_or_none()
            if row_id is None:
                return 0
            await session.execute(delete(self.model).where(self.model.id == row_id))
            return 1

    async def delete_many(self, filter: Filter) -> int:
        """
        Delete every row matching filter.

        Args:
            filter: Field/value pairs that must all match

        Returns:
            Number of rows deleted
        """
        stmt = delete(self.model).where(*self._where(filter))
        async with self._transaction("delete_many") as session:
            result = await session.execute(stmt)
            return result.rowcount

    async def ping(self) -> None:
        """
        Check backend connectivity.

        Raises:
            BackendFailureError: If the backend cannot be reached
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            raise BackendFailureError(
                f"Collection ping failed: {exc}", operation="ping"
            ) from exc

    async def create_schema(self) -> None:
        """Create the model's table if it does not exist."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(self.model.metadata.create_all, tables=[self.model.__table__])
        except SQLAlchemyError as exc:
            raise BackendFailureError(
                f"Collection schema creation failed: {exc}", operation="create_schema"
            ) from exc

    async def dispose(self) -> None:
        """Release all pooled connections."""
        await self.engine.dispose()
