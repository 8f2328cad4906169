from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import FastAPI, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from . import crud, database, presenter, schemas, seed
from .models import OrderStatus
from .search import MAX_RESULTS, OrderSearch


@asynccontextmanager
async def lifespan(app: FastAPI):
    if database.SEED_SAMPLE_DATA:
        database.Base.metadata.create_all(bind=database.engine)
        with database.session_scope() as db:
            seed.load_sample_data(db)
    print("[order-api] ready", flush=True)
    yield


app = FastAPI(title="Order API", lifespan=lifespan)


def order_search(
    status: Optional[OrderStatus] = None,
    name: Optional[str] = None,
) -> OrderSearch:
    return OrderSearch(status=status, member_name=name)


# Simplified orders: member and delivery only.

@app.get("/api/v1/simple-orders", response_model=List[schemas.SimpleOrderEntity])
def simple_orders_v1(search: OrderSearch = Depends(order_search), db: Session = Depends(database.get_db)):
    """Entities exposed as they are; member and delivery load one order at a time."""
    orders = crud.find_all_by_search(db, search)
    return [presenter.to_simple_order_entity(o) for o in orders]


@app.get("/api/v2/simple-orders", response_model=List[schemas.SimpleOrderDto])
def simple_orders_v2(search: OrderSearch = Depends(order_search), db: Session = Depends(database.get_db)):
    # 1 query for orders, then member + delivery per order
    orders = crud.find_all_by_search(db, search)
    return [presenter.to_simple_order_dto(o) for o in orders]


@app.get("/api/v3/simple-orders", response_model=List[schemas.SimpleOrderDto])
def simple_orders_v3(search: OrderSearch = Depends(order_search), db: Session = Depends(database.get_db)):
    orders = crud.find_all_with_member_delivery(db, search)
    return [presenter.to_simple_order_dto(o) for o in orders]


# Orders with their items.

@app.get("/api/v1/orders", response_model=List[schemas.OrderEntity])
def orders_v1(search: OrderSearch = Depends(order_search), db: Session = Depends(database.get_db)):
    orders = crud.find_all_by_search(db, search)
    return [presenter.to_order_entity(o) for o in orders]


@app.get("/api/v2/orders", response_model=List[schemas.OrderDto])
def orders_v2(search: OrderSearch = Depends(order_search), db: Session = Depends(database.get_db)):
    orders = crud.find_all_by_search(db, search)
    return [presenter.to_order_dto(o) for o in orders]


@app.get("/api/v3/orders", response_model=List[schemas.OrderDto])
def orders_v3(db: Session = Depends(database.get_db)):
    orders = crud.find_all_with_items(db)
    return [presenter.to_order_dto(o) for o in orders]


@app.get("/api/v3.1/orders", response_model=List[schemas.OrderDto])
def orders_v3_1(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=MAX_RESULTS),
    db: Session = Depends(database.get_db),
):
    """Paged: to-one relations fetch-joined, items batched in one extra query."""
    orders = crud.find_all_with_member_delivery_paged(db, offset, limit, include_items=True)
    return [presenter.to_order_dto(o) for o in orders]


@app.get("/api/orders/{order_id}", response_model=schemas.OrderDto)
def get_order(order_id: int, db: Session = Depends(database.get_db)):
    order = crud.find_one(db, order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return presenter.to_order_dto(order)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
