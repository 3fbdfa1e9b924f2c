from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from loguru import logger


class InvalidQuantity(ValueError):
    pass


@dataclass(frozen=True, kw_only=True)
class OrderLine:
    order_id: str
    sku: str
    qty: int

    def __post_init__(self) -> None:
        if self.qty <= 0:
            raise InvalidQuantity(f"Order line quantity must be positive, got {self.qty}")


class Batch:
    """A lot of stock for one sku that order lines are allocated against.

    Allocations are a set of value-equal order lines, so allocating the same
    line twice has no further effect. ``eta`` of ``None`` means the batch is
    already in the warehouse.
    """

    def __init__(self, ref: str, sku: str, qty: int, eta: date | None = None) -> None:
        if qty < 0:
            raise InvalidQuantity(f"Purchased quantity must not be negative, got {qty}")
        self.ref = ref
        self.eta = eta
        self._sku = sku
        self._purchased_quantity = qty
        self._allocations: set[OrderLine] = set()

    def __repr__(self) -> str:
        return f"<Batch {self.ref}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Batch):
            return False
        return other.ref == self.ref

    def __hash__(self) -> int:
        return hash(self.ref)

    @property
    def sku(self) -> str:
        return self._sku

    @property
    def purchased_quantity(self) -> int:
        return self._purchased_quantity

    @property
    def allocations(self) -> frozenset[OrderLine]:
        return frozenset(self._allocations)

    def allocate(self, line: OrderLine) -> bool:
        """Allocate ``line`` and report whether it is allocated to this batch."""
        if line in self._allocations:
            return True
        if not self.can_allocate(line):
            logger.debug(f"{self!r} rejected {line} (available {self.available_quantity})")
            return False
        self._allocations.add(line)
        logger.debug(f"{self!r} allocated {line}")
        return True

    def deallocate(self, line: OrderLine) -> bool:
        if line not in self._allocations:
            return False
        self._allocations.remove(line)
        logger.debug(f"{self!r} deallocated {line}")
        return True

    @property
    def allocated_quantity(self) -> int:
        return sum(line.qty for line in self._allocations)

    @property
    def available_quantity(self) -> int:
        return self._purchased_quantity - self.allocated_quantity

    def can_allocate(self, line: OrderLine) -> bool:
        return self.sku == line.sku and self.available_quantity >= line.qty
