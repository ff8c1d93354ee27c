from __future__ import annotations

from sprocket_api.repositories.unit_of_work import UnitOfWork


class BaseService:
    """
    Base class for services. Holds a unit of work for use across repositories.

    Services keep business logic and orchestration, delegating data access
    to repositories and transaction control to the unit of work.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow
        self.session = uow.session
