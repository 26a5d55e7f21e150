"""Application service: dashboard figures (query).

Drafts are not real orders yet and are left out of every admin figure.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from portal.domain.model.order import OrderStatus
from portal.domain.model.profile import UNKNOWN_PARTNER
from portal.domain.model.value_objects import Money
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.profile_repository import ProfileRepository

TOP_CUSTOMERS = 5
RECENT_ORDERS = 5


@dataclass(frozen=True)
class CustomerRevenueDTO:
    name: str
    email: str
    revenue: str
    order_count: int


@dataclass(frozen=True)
class AdminDashboardDTO:
    total_orders: int
    pending_orders: int
    completed_orders: int
    total_revenue: str
    revenue_by_day: list[tuple[str, str]]
    top_customers: list[CustomerRevenueDTO]


@dataclass(frozen=True)
class CustomerDashboardDTO:
    company_name: str
    pending_orders: int
    recent_orders: list[tuple[str, str, str]]  # number, status, total


class ShowAdminDashboardHandler:

    def __init__(self, order_repo: OrderRepository, profile_repo: ProfileRepository) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo

    def handle(self) -> AdminDashboardDTO:
        orders = sorted(
            (o for o in self._order_repo.list_all() if o.status != OrderStatus.DRAFT),
            key=lambda o: o.created_at,
        )

        revenue = Money.zero()
        by_day: dict[str, Money] = {}
        per_customer: dict[str, list] = defaultdict(lambda: [Money.zero(), 0])
        for order in orders:
            revenue = revenue + order.total_amount
            day = order.created_at.strftime("%Y-%m-%d")
            by_day[day] = by_day.get(day, Money.zero()) + order.total_amount
            entry = per_customer[order.customer_id]
            entry[0] = entry[0] + order.total_amount
            entry[1] += 1

        ranked = sorted(per_customer.items(), key=lambda kv: kv[1][0].amount, reverse=True)
        top = []
        for customer_id, (amount, count) in ranked[:TOP_CUSTOMERS]:
            profile = self._profile_repo.get_by_id(customer_id)
            top.append(
                CustomerRevenueDTO(
                    name=profile.display_name if profile else UNKNOWN_PARTNER,
                    email=profile.email if profile and profile.email else "N/A",
                    revenue=str(amount),
                    order_count=count,
                )
            )

        return AdminDashboardDTO(
            total_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            completed_orders=sum(
                1 for o in orders if o.status in (OrderStatus.SHIPPED, OrderStatus.COMPLETED)
            ),
            total_revenue=str(revenue),
            revenue_by_day=[(day, str(amount)) for day, amount in by_day.items()],
            top_customers=top,
        )


class ShowCustomerDashboardHandler:

    def __init__(self, order_repo: OrderRepository, profile_repo: ProfileRepository) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo

    def handle(self, customer_id: str) -> CustomerDashboardDTO:
        orders = self._order_repo.list_for_customer(customer_id)
        profile = self._profile_repo.get_by_id(customer_id)
        return CustomerDashboardDTO(
            company_name=profile.display_name if profile else UNKNOWN_PARTNER,
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            recent_orders=[
                (o.display_number, o.status.value, str(o.total_amount))
                for o in orders[:RECENT_ORDERS]
            ],
        )
