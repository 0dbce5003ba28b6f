"""Generic CRUD operations over an injected repository.

``CrudOperations[T]`` is composed into entity services instead of being
inherited from: the service keeps full control over what happens between a
look-up and a persist (merging, business rules), while the shared storage
calls and their logging live here once.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

import structlog

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class CrudOperations(Generic[T]):
    """Logged pass-through to an ``IRepository[T]``."""

    def __init__(self, repository: IRepository[T], entity_name: str) -> None:
        self._repo = repository
        self._log = logger.bind(entity=entity_name)

    def find_all(self) -> List[T]:
        self._log.info("crud.find_all.started")
        entities = self._repo.list()
        self._log.info("crud.find_all.completed", count=len(entities))
        return entities

    def find_by_id(self, id: int) -> Optional[T]:
        log = self._log.bind(entity_id=id)
        log.info("crud.find_by_id.started")
        entity = self._repo.get_by_id(id)
        if entity is None:
            log.warning("crud.find_by_id.not_found")
        else:
            log.info("crud.find_by_id.found")
        return entity

    def save(self, entity: T) -> T:
        self._log.info("crud.save.started")
        saved = self._repo.save(entity)
        self._log.info("crud.save.completed", entity_id=getattr(saved, "pk", None))
        return saved

    def exists_by_id(self, id: int) -> bool:
        exists = self._repo.exists(id)
        self._log.debug("crud.exists_by_id", entity_id=id, exists=exists)
        return exists

    def delete_by_id(self, id: int) -> None:
        log = self._log.bind(entity_id=id)
        log.info("crud.delete_by_id.started")
        self._repo.delete(id)
        log.info("crud.delete_by_id.completed")
