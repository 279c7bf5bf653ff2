"""Exports router: downloadable snapshots of the complete user view."""

import logging

from fastapi import APIRouter, Query, Response

from profilehub.application.dtos import Snapshot
from profilehub.presentation.api.dependencies import CurrentAccount, Services

logger = logging.getLogger(__name__)

router = APIRouter()


def snapshot_response(snapshot: Snapshot) -> Response:
    return Response(
        content=snapshot.content,
        media_type=snapshot.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{snapshot.filename}"',
        },
    )


@router.get(
    "/me",
    summary="Export everything stored about the current account",
    responses={
        200: {
            "content": {"application/json": {}, "text/csv": {}},
            "description": "Snapshot file",
        },
        400: {"description": "Unsupported format"},
    },
)
async def export_me(
    account: CurrentAccount,
    services: Services,
    format: str = Query(default="json", description="json or csv"),
) -> Response:
    snapshot = await services.user_data.export_snapshot(account.id, format)
    return snapshot_response(snapshot)
