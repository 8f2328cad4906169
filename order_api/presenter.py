"""
Order aggregate -> response models.

Nothing here queries on its own, but reading a relation the retrieval mode
left unloaded does: with crud.find_all_by_search every order pays one SELECT
for its member and one for its delivery (plus one per item list and item for
the full DTO). With the fetch-join modes the same calls cost nothing.
"""
from . import models, schemas


def _address(address: models.Address) -> schemas.AddressDto:
    return schemas.AddressDto.model_validate(address)


def to_simple_order_dto(order: models.Order) -> schemas.SimpleOrderDto:
    return schemas.SimpleOrderDto(
        order_id=order.id,
        name=order.member.name,
        order_date=order.order_date,
        order_status=order.status,
        address=_address(order.delivery.address),
    )


def to_order_item_dto(order_item: models.OrderItem) -> schemas.OrderItemDto:
    return schemas.OrderItemDto(
        item_name=order_item.item.name,
        order_price=order_item.order_price,
        count=order_item.count,
    )


def to_order_dto(order: models.Order) -> schemas.OrderDto:
    simple = to_simple_order_dto(order)
    return schemas.OrderDto(
        **simple.model_dump(),
        order_items=[to_order_item_dto(oi) for oi in order.order_items],
    )


def to_simple_order_entity(order: models.Order) -> schemas.SimpleOrderEntity:
    return schemas.SimpleOrderEntity.model_validate(order)


def to_order_entity(order: models.Order) -> schemas.OrderEntity:
    return schemas.OrderEntity.model_validate(order)
