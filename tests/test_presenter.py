from datetime import datetime

from order_api import crud, presenter, schemas
from order_api.models import OrderStatus


def test_order_dto_fields(db):
    dto = presenter.to_order_dto(crud.find_one(db, 1))

    assert dto.order_id == 1
    assert dto.name == "userA"
    assert dto.order_date == datetime(2024, 1, 10, 9, 30)
    assert dto.order_status == OrderStatus.ORDER
    assert dto.address == schemas.AddressDto(city="Seoul", street="1", zipcode="1111")
    assert dto.order_items == [
        schemas.OrderItemDto(item_name="JPA1 BOOK", order_price=10000, count=1),
        schemas.OrderItemDto(item_name="JPA2 BOOK", order_price=20000, count=2),
    ]


def test_mapping_is_idempotent(db):
    order = crud.find_one(db, 2)

    assert presenter.to_order_dto(order) == presenter.to_order_dto(order)
    assert presenter.to_simple_order_dto(order) == presenter.to_simple_order_dto(order)


def test_dtos_expose_no_orm_objects(db):
    payload = presenter.to_order_dto(crud.find_one(db, 1)).model_dump()

    assert set(payload) == {"order_id", "name", "order_date", "order_status", "address", "order_items"}
    assert set(payload["order_items"][0]) == {"item_name", "order_price", "count"}


def test_entity_shape_has_no_back_references(db):
    entity = presenter.to_order_entity(crud.find_one(db, 2))

    assert entity.member.name == "userB"
    assert entity.delivery.address.city == "Busan"
    assert entity.order_items[0].item.name == "Spring1 BOOK"
    # stock was reduced when the order was placed
    assert entity.order_items[0].item.stock_quantity == 200 - 3
    assert "order" not in entity.order_items[0].model_dump()
