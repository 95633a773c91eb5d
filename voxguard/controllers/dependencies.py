"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import Depends, HTTPException, Request, UploadFile, status

from voxguard.domain.models import AudioBlob
from voxguard.services.encoder import read_upload
from voxguard.services.errors import EncodingError
from voxguard.sessions import AppStore


def get_store(request: Request) -> AppStore:
    """Return the application store created by the app factory."""

    return request.app.state.store


StoreDep = Annotated[AppStore, Depends(get_store)]


async def load_upload(audio_file: UploadFile) -> AudioBlob:
    """Buffer an upload, turning encoder failures into 400 responses."""

    try:
        return await read_upload(audio_file)
    except EncodingError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


def reject_intent(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


async def settle(task: asyncio.Task | None) -> None:
    """Wait for a session task without letting a client disconnect cancel it."""

    if task is not None:
        await asyncio.shield(task)


__all__ = ["StoreDep", "get_store", "load_upload", "reject_intent", "settle"]
