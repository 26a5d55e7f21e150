"""Application service: List Orders use case (query).

Customers see their own history; the admin view lists everybody's
orders with an optional status filter and a free-text search over the
order number and the buyer's company name and e-mail.
"""

from __future__ import annotations

from portal.application.dto import OrderDTO, order_to_dto
from portal.domain.model.order import OrderStatus
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.profile_repository import ProfileRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, profile_repo: ProfileRepository) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo

    def handle(
        self,
        customer_id: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> list[OrderDTO]:
        if customer_id is not None:
            orders = self._order_repo.list_for_customer(customer_id)
        else:
            orders = self._order_repo.list_all()

        if status:
            wanted = OrderStatus.parse(status)
            orders = [o for o in orders if o.status == wanted]

        if search:
            needle = search.strip().lower()
            matching = []
            for order in orders:
                profile = self._profile_repo.get_by_id(order.customer_id)
                haystack = [order.order_number, order.id or ""]
                if profile is not None:
                    haystack += [profile.company_name, profile.email]
                if any(needle in text.lower() for text in haystack if text):
                    matching.append(order)
            orders = matching

        return [order_to_dto(o) for o in orders]
