"""Application services: customer delivery addresses.

The default flag is kept unique per customer here, by clearing it on
the customer's other addresses whenever one is made the default.
"""

from __future__ import annotations

from portal.domain.exceptions import EntityNotFoundError
from portal.domain.model.address import DeliveryAddress
from portal.domain.repository.address_repository import AddressRepository


class AddAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(
        self,
        customer_id: str,
        site_name: str,
        address: str,
        contact_name: str = "",
        is_default: bool = False,
    ) -> DeliveryAddress:
        new = DeliveryAddress.create(customer_id, site_name, address, contact_name, is_default)
        if is_default:
            _clear_default(self._address_repo, customer_id)
        self._address_repo.save(new)
        return new


class SetDefaultAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, customer_id: str, address_id: str) -> None:
        address = _owned(self._address_repo, customer_id, address_id)
        _clear_default(self._address_repo, customer_id)
        address.is_default = True
        self._address_repo.save(address)


class DeleteAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, customer_id: str, address_id: str) -> None:
        """Delete a saved address. Orders keep their own snapshot."""
        _owned(self._address_repo, customer_id, address_id)
        self._address_repo.delete(address_id)


def _owned(repo: AddressRepository, customer_id: str, address_id: str) -> DeliveryAddress:
    address = repo.get_by_id(address_id)
    if address is None or address.customer_id != customer_id:
        raise EntityNotFoundError(f"Delivery address '{address_id}' not found")
    return address


def _clear_default(repo: AddressRepository, customer_id: str) -> None:
    for other in repo.list_for_customer(customer_id):
        if other.is_default:
            other.is_default = False
            repo.save(other)
