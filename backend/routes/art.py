from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from backend.core import RecordStore, get_store, parse_record_id
from backend.schemas import SuccessResponse

router = APIRouter(prefix="/api/art", tags=["Artwork"])


@router.get("")
def list_artworks(store: RecordStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """Get all artworks, most recent upload first"""
    return store.list_artworks()


@router.post("")
def create_artwork(
    art_data: Optional[Dict[str, Any]] = Body(default=None),
    store: RecordStore = Depends(get_store),
):
    """Publish an artwork. It is prepended and gets a server-assigned id."""
    return store.insert_artwork(art_data or {})


@router.delete("/{art_id}", response_model=SuccessResponse)
def delete_artwork(art_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete artwork by ID
    Always succeeds, deleting an unknown id is a no-op
    """
    store.delete_artwork(parse_record_id(art_id))
    return SuccessResponse()
