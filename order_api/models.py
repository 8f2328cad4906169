from dataclasses import dataclass
from datetime import datetime
import enum
from sqlalchemy import Column, String, Integer, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship, composite
from .database import Base


class OrderStatus(str, enum.Enum):
    ORDER = "ORDER"
    CANCEL = "CANCEL"


class DeliveryStatus(str, enum.Enum):
    READY = "READY"
    COMP = "COMP"


@dataclass
class Address:
    city: str
    street: str
    zipcode: str


# Relations are "raise_on_sql": a relation is only readable when the query
# that produced the row said how to load it (see crud.py).

class Member(Base):
    __tablename__ = "members"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    city = Column(String)
    street = Column(String)
    zipcode = Column(String)
    address = composite(Address, city, street, zipcode)


class Item(Base):
    __tablename__ = "items"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Integer, nullable=False)
    stock_quantity = Column(Integer, nullable=False, server_default="0")


class Delivery(Base):
    __tablename__ = "deliveries"
    id = Column(Integer, primary_key=True, autoincrement=True)
    city = Column(String, nullable=False)
    street = Column(String, nullable=False)
    zipcode = Column(String, nullable=False)
    address = composite(Address, city, street, zipcode)
    status = Column(Enum(DeliveryStatus), nullable=False, default=DeliveryStatus.READY)


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    delivery_id = Column(Integer, ForeignKey("deliveries.id"), nullable=False, unique=True)
    order_date = Column(DateTime, nullable=False, default=datetime.now)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.ORDER)
    member = relationship("Member", lazy="raise_on_sql")
    delivery = relationship("Delivery", lazy="raise_on_sql")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="raise_on_sql",
    )


class OrderItem(Base):
    __tablename__ = "order_items"
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    order_price = Column(Integer, nullable=False)
    count = Column(Integer, nullable=False)
    order = relationship("Order", back_populates="order_items", lazy="raise_on_sql")
    item = relationship("Item", lazy="raise_on_sql")
