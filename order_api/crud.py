from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, contains_eager, joinedload, lazyload, selectinload
from . import models
from .search import OrderSearch, build_order_query


def save_order(db: Session, order: models.Order) -> models.Order:
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def find_one(db: Session, order_id: int) -> Optional[models.Order]:
    """Whole aggregate for one order: member, delivery and items with their item rows."""
    stmt = (
        select(models.Order)
        .where(models.Order.id == order_id)
        .options(
            joinedload(models.Order.member),
            joinedload(models.Order.delivery),
            selectinload(models.Order.order_items).joinedload(models.OrderItem.item),
        )
    )
    return db.scalars(stmt).first()


def find_all(db: Session) -> List[models.Order]:
    return list(db.scalars(select(models.Order)))


def find_all_by_search(db: Session, search: OrderSearch) -> List[models.Order]:
    """
    Orders matching the search; nothing related is loaded up front.

    Every first read of order.member, order.delivery, order.order_items and
    order_item.item costs one SELECT of its own. For N orders that is
    1 + N (member) + N (delivery) + ... round trips.
    """
    stmt = build_order_query(search).options(
        lazyload(models.Order.member),
        lazyload(models.Order.delivery),
        lazyload(models.Order.order_items).lazyload(models.OrderItem.item),
    )
    return list(db.scalars(stmt))


def _with_member_delivery(search: Optional[OrderSearch]):
    # member is already joined by build_order_query
    return (
        build_order_query(search or OrderSearch())
        .join(models.Order.delivery)
        .options(
            contains_eager(models.Order.member),
            contains_eager(models.Order.delivery),
        )
    )


def find_all_with_member_delivery(db: Session, search: Optional[OrderSearch] = None) -> List[models.Order]:
    # to-one joins do not multiply rows
    return list(db.scalars(_with_member_delivery(search)))


def find_all_with_items(db: Session) -> List[models.Order]:
    """
    Member, delivery, order items and items in one statement.

    The order_items join repeats each order once per item, so the result is
    made unique by identity. Do not page this query: offset/limit would
    apply to the multiplied rows, not to orders.
    """
    stmt = (
        select(models.Order)
        .join(models.Order.member)
        .join(models.Order.delivery)
        .join(models.Order.order_items)
        .join(models.OrderItem.item)
        .options(
            contains_eager(models.Order.member),
            contains_eager(models.Order.delivery),
            contains_eager(models.Order.order_items).contains_eager(models.OrderItem.item),
        )
        .order_by(models.Order.id, models.OrderItem.id)
    )
    return list(db.scalars(stmt).unique())


def find_all_with_member_delivery_paged(
    db: Session,
    offset: int,
    limit: int,
    search: Optional[OrderSearch] = None,
    include_items: bool = False,
) -> List[models.Order]:
    stmt = _with_member_delivery(search).order_by(models.Order.id).offset(offset).limit(limit)
    if include_items:
        # second statement with IN (...) over the page's order ids
        stmt = stmt.options(selectinload(models.Order.order_items).joinedload(models.OrderItem.item))
    return list(db.scalars(stmt))
