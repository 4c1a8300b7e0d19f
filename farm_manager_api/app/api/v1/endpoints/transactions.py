"""Transaction endpoints for API v1."""

from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.transaction import TransactionCreate, TransactionRead

router = crud_router("transactions", TransactionCreate, TransactionRead)
