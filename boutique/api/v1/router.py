# boutique/api/v1/router.py
from fastapi import APIRouter
from boutique.shared.schemas.common import ErrorResponse
from boutique.api.v1.auth import router as auth_router
from boutique.modules.categories.router import router as categories_router
from boutique.modules.clients.router import router as clients_router
from boutique.modules.phones.router import router as phones_router
from boutique.modules.sales.router import router as sales_router
from boutique.modules.users.router import router as users_router

# Domain errors share one body shape (see boutique/api/error_handlers.py)
api_router = APIRouter(responses={
    400: {"model": ErrorResponse, "description": "Business rule violated"},
    404: {"model": ErrorResponse, "description": "Entity or result set not found"},
})

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(
    categories_router,
    prefix="/category",
    tags=["Categories"]
)

api_router.include_router(
    clients_router,
    prefix="/client",
    tags=["Clients"]
)

api_router.include_router(
    phones_router,
    prefix="/phone",
    tags=["Phones"]
)

api_router.include_router(
    sales_router,
    prefix="/sell",
    tags=["Sales"]
)

api_router.include_router(
    users_router,
    prefix="/user",
    tags=["Users"]
)
