"""
Order search filters and the select they turn into.

Each provided filter becomes one typed clause; the clauses are ANDed onto
``SELECT orders JOIN members``. Filters that were not provided leave no
trace in the WHERE clause.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from sqlalchemy import ColumnElement, Select, select
from .models import Member, Order, OrderStatus

MAX_RESULTS = 1000


class OrderSearch(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Optional[OrderStatus] = None
    member_name: Optional[str] = None

    @property
    def has_member_name(self) -> bool:
        return bool(self.member_name and self.member_name.strip())


def order_conditions(search: OrderSearch) -> List[ColumnElement]:
    conditions = []
    if search.status is not None:
        conditions.append(Order.status == search.status)
    if search.has_member_name:
        conditions.append(Member.name.contains(search.member_name, autoescape=True))
    return conditions


def build_order_query(search: OrderSearch) -> Select:
    stmt = select(Order).join(Order.member)
    conditions = order_conditions(search)
    if conditions:
        stmt = stmt.where(*conditions)
    return stmt.limit(MAX_RESULTS)
