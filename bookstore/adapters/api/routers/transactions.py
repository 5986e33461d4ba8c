# bookstore/adapters/api/routers/transactions.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from bookstore.adapters.api.dependencies import (
    get_browse_transactions,
    get_compute_statistics,
    get_current_user,
    get_place_order,
)
from bookstore.adapters.api.pagination import build_meta, page_params
from bookstore.adapters.api.schemas.common import Envelope, PaginatedEnvelope
from bookstore.adapters.api.schemas.transactions import (
    CreateTransactionRequest,
    StatisticsRead,
    TransactionCreated,
    TransactionDetail,
    TransactionSummary,
)
from bookstore.core.domain.models import AuthenticatedUser, OrderLine, PageRequest, SortDirection
from bookstore.core.use_cases import BrowseTransactions, ComputeStatistics, PlaceOrder

router = APIRouter(
    prefix="/transactions",
    tags=["Transactions"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "",
    response_model=Envelope[TransactionCreated],
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    description=(
        "Validates every line, checks stock and writes the order, its items and "
        "the stock decrements atomically. Any failure leaves storage unchanged."
    ),
)
def create_transaction(
    payload: CreateTransactionRequest,
    current: AuthenticatedUser = Depends(get_current_user),
    use_case: PlaceOrder = Depends(get_place_order),
):
    lines = [OrderLine(book_id=str(item.book_id), quantity=item.quantity) for item in payload.items]
    receipt = use_case.execute(current.id, lines)
    return Envelope(
        message="Transaction created successfully",
        data=TransactionCreated(
            transaction_id=receipt.order_id,
            total_quantity=receipt.total_quantity,
            total_price=float(receipt.total_price),
        ),
    )


@router.get("", response_model=PaginatedEnvelope[TransactionSummary], summary="List transactions")
def list_transactions(
    *,
    use_case: BrowseTransactions = Depends(get_browse_transactions),
    paging: PageRequest = Depends(page_params),
    order_by_id: Optional[str] = Query(None, alias="orderById", description="asc | desc (by creation time)"),
):
    direction = SortDirection.parse(order_by_id, SortDirection.DESC)
    page = use_case.list_transactions(paging, direction)
    return PaginatedEnvelope(
        message="Get all transactions successfully",
        data=[TransactionSummary.from_record(o) for o in page.items],
        meta=build_meta(paging, page.total),
    )


# Registered before "/{order_id}" so "statistics" is not taken for an id.
@router.get("/statistics", response_model=Envelope[StatisticsRead], summary="Sales statistics")
def get_statistics(use_case: ComputeStatistics = Depends(get_compute_statistics)):
    stats = use_case.execute()
    return Envelope(
        message="Get transaction statistics successfully",
        data=StatisticsRead.from_domain(stats),
    )


@router.get("/{order_id}", response_model=Envelope[TransactionDetail], summary="Transaction detail")
def get_transaction(order_id: str, use_case: BrowseTransactions = Depends(get_browse_transactions)):
    order = use_case.get_transaction(order_id)
    return Envelope(
        message="Get transaction detail successfully",
        data=TransactionDetail.from_record(order),
    )
