"""Order Resource — CRUD over /orders plus the complete/cancel transitions.

Invariants:
    - POST forces status to IN_PROGRESS and returns 201 with Location /orders/{id}
    - PUT /orders/{id}/complete and DELETE /orders/{id}/cancel succeed only from IN_PROGRESS
    - A refused transition returns 405 + Problem naming the current status
    - Missing order raises OrderNotFoundError (rendered centrally as 404)
    - Orders are never edited in place: there is no PUT /orders/{id}

Design Decisions:
    - Problem envelope formatted here, not in the global handler: its detail depends
      on the order just read
    - find -> transition -> save is not transactional; two racing transitions both
      end in a terminal status, the later save wins
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from payroll.api.dependencies import (
    EntityIdPath, get_order_assembler, get_order_repository, get_uri_builder,
)
from payroll.api.responses import problem_response
from payroll.core.assembler import OrderModelAssembler
from payroll.core.domain_types import OrderId
from payroll.core.entities import Order
from payroll.core.errors import InvalidTransitionError, OrderNotFoundError
from payroll.core.order_lifecycle import OrderAction, apply_transition
from payroll.core.repository_protocols import OrderRepository
from payroll.core.uri_builder import Route, UriBuilder
from payroll.schemas.order import OrderCreate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["orders"])


async def get_order_or_404(order_id: int, repository: OrderRepository) -> Order:
    order = await repository.find_by_id(OrderId(order_id))
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


@router.get(Route.ORDERS.value)
async def all_orders(
    repository: OrderRepository = Depends(get_order_repository),
    assembler: OrderModelAssembler = Depends(get_order_assembler),
):
    return assembler.to_collection_model(await repository.find_all())


@router.get(Route.ORDER.value)
async def one_order(
    order_id: EntityIdPath,
    repository: OrderRepository = Depends(get_order_repository),
    assembler: OrderModelAssembler = Depends(get_order_assembler),
):
    order = await get_order_or_404(order_id, repository)
    return assembler.to_model(order)


@router.post(Route.ORDERS.value, status_code=status.HTTP_201_CREATED)
async def new_order(
    body: OrderCreate,
    response: Response,
    repository: OrderRepository = Depends(get_order_repository),
    assembler: OrderModelAssembler = Depends(get_order_assembler),
    uris: UriBuilder = Depends(get_uri_builder),
):
    """Create an order in IN_PROGRESS, whatever status the client sent."""
    saved = await repository.save(body.to_entity())
    logger.info(
        f"Created {saved}",
        extra={"order_id": saved.id, "status": saved.status.value},
    )
    response.headers["Location"] = uris.build(Route.ORDER, order_id=saved.id)
    return assembler.to_model(saved)


@router.put(Route.ORDER_COMPLETE.value)
async def complete_order(
    order_id: EntityIdPath,
    repository: OrderRepository = Depends(get_order_repository),
    assembler: OrderModelAssembler = Depends(get_order_assembler),
):
    return await _transition(order_id, OrderAction.COMPLETE, repository, assembler)


@router.delete(Route.ORDER_CANCEL.value)
async def cancel_order(
    order_id: EntityIdPath,
    repository: OrderRepository = Depends(get_order_repository),
    assembler: OrderModelAssembler = Depends(get_order_assembler),
):
    return await _transition(order_id, OrderAction.CANCEL, repository, assembler)


async def _transition(
    order_id: EntityIdPath,
    action: OrderAction,
    repository: OrderRepository,
    assembler: OrderModelAssembler,
):
    order = await get_order_or_404(order_id, repository)
    try:
        updated = apply_transition(order, action)
    except InvalidTransitionError as exc:
        logger.info(
            exc.message,
            extra={
                "order_id": order_id, "status": order.status.value,
                "action": action.value,
            },
        )
        return problem_response(exc)
    saved = await repository.save(updated)
    logger.info(
        f"Order {action.value} applied",
        extra={
            "order_id": order_id, "status": saved.status.value,
            "action": action.value,
        },
    )
    return assembler.to_model(saved)
