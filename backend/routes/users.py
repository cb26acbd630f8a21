from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from backend.core import RecordStore, get_store, parse_record_id
from backend.schemas import ErrorResponse

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("")
def list_users(store: RecordStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """
    Get all users in storage order
    Passwords are included, there is no response filtering
    """
    return store.list_users()


@router.post("")
def create_user(
    user_data: Optional[Dict[str, Any]] = Body(default=None),
    store: RecordStore = Depends(get_store),
):
    """
    Register a new user

    - Body is stored as-is, no schema validation
    - Server assigns the id, a client-supplied id is overwritten
    - Email uniqueness is not checked here
    """
    return store.insert_user(user_data or {})


@router.put("/{user_id}", responses={404: {"model": ErrorResponse}})
def update_user(
    user_id: str,
    user_data: Optional[Dict[str, Any]] = Body(default=None),
    store: RecordStore = Depends(get_store),
):
    """
    Shallow-merge the body over an existing user

    Supplied keys overwrite, all others are kept. An id in the body is merged too.
    Unknown ids raise RecordNotFoundError, answered with 404 by the app handler.
    """
    return store.update_user(parse_record_id(user_id), user_data or {})
