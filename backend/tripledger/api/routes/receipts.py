"""
Receipt image download.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse
from tripledger.core.exceptions import NotFoundError
from tripledger.models.user import User
from tripledger.api.dependencies import get_current_user
from tripledger.services.receipt_service import resolve_receipt

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.get("/{filename}")
async def get_receipt(filename: str, current_user: User = Depends(get_current_user)):
    """Serve a stored receipt image."""
    try:
        path = resolve_receipt(filename)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="File not found"
        )
    return FileResponse(path)
