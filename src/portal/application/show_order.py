"""Application service: Show Order use case (query)."""

from __future__ import annotations

from portal.application.dto import OrderDTO, order_to_dto
from portal.domain.exceptions import EntityNotFoundError
from portal.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, customer_id: str | None = None) -> OrderDTO:
        """Return one order; a customer only ever sees their own."""
        order = self._order_repo.get_by_id(order_id)
        if order is None or (customer_id is not None and order.customer_id != customer_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
