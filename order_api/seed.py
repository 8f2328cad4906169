from dataclasses import replace
from datetime import datetime
from sqlalchemy import select
from sqlalchemy.orm import Session
from . import models


def _member(name: str, city: str, street: str, zipcode: str) -> models.Member:
    return models.Member(name=name, address=models.Address(city, street, zipcode))


def _book(name: str, price: int, stock_quantity: int) -> models.Item:
    return models.Item(name=name, price=price, stock_quantity=stock_quantity)


def _order(member: models.Member, lines, order_date: datetime) -> models.Order:
    order = models.Order(
        member=member,
        delivery=models.Delivery(address=replace(member.address), status=models.DeliveryStatus.READY),
        order_date=order_date,
        status=models.OrderStatus.ORDER,
    )
    for item, count in lines:
        item.stock_quantity -= count
        order.order_items.append(models.OrderItem(item=item, order_price=item.price, count=count))
    return order


def load_sample_data(db: Session) -> bool:
    """
    Two members with one two-line order each. Returns False if data already exists.
    Nothing is committed here; the caller's session_scope owns the transaction.
    """
    if db.scalars(select(models.Member.id).limit(1)).first() is not None:
        return False

    user_a = _member("userA", "Seoul", "1", "1111")
    user_b = _member("userB", "Busan", "2", "2222")
    jpa1 = _book("JPA1 BOOK", 10000, 100)
    jpa2 = _book("JPA2 BOOK", 20000, 100)
    spring1 = _book("Spring1 BOOK", 20000, 200)
    spring2 = _book("Spring2 BOOK", 40000, 300)

    db.add_all([
        _order(user_a, [(jpa1, 1), (jpa2, 2)], datetime(2024, 1, 10, 9, 30)),
        _order(user_b, [(spring1, 3), (spring2, 4)], datetime(2024, 1, 11, 14, 0)),
    ])
    db.flush()
    print("[order-api] sample data staged: 2 members, 4 items, 2 orders", flush=True)
    return True
