"""
Sweet endpoints.

Listing, searching and viewing sweets is public.  Buying requires a
logged‑in user; adding, editing, deleting and restocking sweets is
reserved for the administrator.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.exceptions import SweetShopError
from ...schemas.sweet import DeleteResult, StockChange, SweetCreate, SweetRead, SweetUpdate
from ...services.sweet_service import SweetService
from ..deps import get_current_user, get_sweet_service, raise_http_error, require_admin

router = APIRouter()


@router.get("", response_model=List[SweetRead])
async def list_sweets(service: SweetService = Depends(get_sweet_service)) -> List[SweetRead]:
    """Return every sweet in catalogue order."""
    return [SweetRead.model_validate(sweet) for sweet in service.list_all()]


@router.get("/search", response_model=List[SweetRead])
async def search_sweets(
    name: Optional[str] = Query(None),
    q: Optional[str] = Query(None, description="Alias for ``name``"),
    category: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    service: SweetService = Depends(get_sweet_service),
) -> List[SweetRead]:
    """Filter sweets by name, category and an inclusive price range.

    All filters are optional and combine with AND.
    """
    results = service.search(
        name=name or q,
        category=category,
        min_price=min_price,
        max_price=max_price,
    )
    return [SweetRead.model_validate(sweet) for sweet in results]


@router.get("/{sweet_id}", response_model=SweetRead)
async def get_sweet(sweet_id: str, service: SweetService = Depends(get_sweet_service)) -> SweetRead:
    sweet = service.get_by_id(sweet_id)
    if sweet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sweet not found")
    return SweetRead.model_validate(sweet)


@router.post("", response_model=SweetRead, status_code=status.HTTP_201_CREATED)
async def create_sweet(
    sweet_in: SweetCreate,
    current_user: Dict[str, Any] = Depends(require_admin),
    service: SweetService = Depends(get_sweet_service),
) -> SweetRead:
    """Add a sweet (admin only)."""
    try:
        sweet = service.create_item(sweet_in)
    except SweetShopError as exc:
        raise_http_error(exc)
    return SweetRead.model_validate(sweet)


@router.put("/{sweet_id}", response_model=SweetRead)
async def update_sweet(
    sweet_id: str,
    sweet_in: SweetUpdate,
    current_user: Dict[str, Any] = Depends(require_admin),
    service: SweetService = Depends(get_sweet_service),
) -> SweetRead:
    """Update a sweet (admin only)."""
    try:
        sweet = service.update_item(sweet_id, sweet_in)
    except SweetShopError as exc:
        raise_http_error(exc)
    if sweet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sweet not found")
    return SweetRead.model_validate(sweet)


@router.delete("/{sweet_id}", response_model=DeleteResult)
async def delete_sweet(
    sweet_id: str,
    current_user: Dict[str, Any] = Depends(require_admin),
    service: SweetService = Depends(get_sweet_service),
) -> DeleteResult:
    """Delete a sweet (admin only).  ``success`` is false for unknown ids."""
    return DeleteResult(success=service.delete_item(sweet_id))


@router.post("/{sweet_id}/purchase", response_model=SweetRead)
async def purchase_sweet(
    sweet_id: str,
    payload: Optional[StockChange] = None,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: SweetService = Depends(get_sweet_service),
) -> SweetRead:
    """Buy one or more units of a sweet.  The body may be omitted."""
    quantity = payload.quantity if payload is not None else 1
    try:
        sweet = service.purchase(sweet_id, quantity)
    except SweetShopError as exc:
        raise_http_error(exc)
    return SweetRead.model_validate(sweet)


@router.post("/{sweet_id}/restock", response_model=SweetRead)
async def restock_sweet(
    sweet_id: str,
    payload: Optional[StockChange] = None,
    current_user: Dict[str, Any] = Depends(require_admin),
    service: SweetService = Depends(get_sweet_service),
) -> SweetRead:
    """Add stock to a sweet (admin only)."""
    quantity = payload.quantity if payload is not None else 1
    try:
        sweet = service.restock(sweet_id, quantity)
    except SweetShopError as exc:
        raise_http_error(exc)
    return SweetRead.model_validate(sweet)
