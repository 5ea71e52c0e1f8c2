"""
Users router: fetch-all and replace-all over the stored collection.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from userstore.database.connections import get_store
from userstore.database.json_store import (
    JsonCredentialStore,
    StoreCorruptedError,
    StoreWriteError,
)
from userstore.models.credential import Credential
from userstore.schemas.users import StatusResponse, duplicate_usernames

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    summary="Fetch the full credential collection",
)
def fetch_users(store: JsonCredentialStore = Depends(get_store)):
    """
    Return every stored credential record, in stored order.

    Returns `[]` when nothing has been stored yet.
    """
    try:
        collection = store.fetch_all()
    except StoreCorruptedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    return JSONResponse(content=[record.to_document() for record in collection])


@router.post(
    "",
    response_model=StatusResponse,
    summary="Replace the full credential collection",
)
def replace_users(
    body: list[Credential],
    store: JsonCredentialStore = Depends(get_store),
):
    """
    Overwrite the stored collection with the request body.

    This is not a merge: records missing from the body are discarded.
    Usernames must be unique.
    """
    duplicates = duplicate_usernames(body)
    if duplicates:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Duplicate usernames: {', '.join(duplicates)}",
        )

    try:
        store.replace_all(body)
    except StoreWriteError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    return StatusResponse(status="ok")
