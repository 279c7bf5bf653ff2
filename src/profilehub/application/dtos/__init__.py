from profilehub.application.dtos.user_view_dto import (
    AccountDTO,
    CascadeResult,
    CascadeStep,
    CompleteUserView,
    Snapshot,
    SnapshotFormat,
    SystemStats,
)

__all__ = [
    "AccountDTO",
    "CascadeResult",
    "CascadeStep",
    "CompleteUserView",
    "Snapshot",
    "SnapshotFormat",
    "SystemStats",
]
