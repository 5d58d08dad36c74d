"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from tripledger.api.routes import (
    auth, users, trips, expenses, categories,
    payment_types, receipts, reports
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(trips.router)
api_router.include_router(expenses.router)
api_router.include_router(categories.router)
api_router.include_router(payment_types.router)
api_router.include_router(receipts.router)
api_router.include_router(reports.router)
