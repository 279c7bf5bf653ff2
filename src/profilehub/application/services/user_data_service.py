"""Aggregation service composing the four stores into one user record."""

from __future__ import annotations

import asyncio
import csv
import io
import json
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union
from uuid import UUID

from profilehub.application.dtos import (
    AccountDTO,
    CascadeResult,
    CascadeStep,
    CompleteUserView,
    Snapshot,
    SnapshotFormat,
    SystemStats,
)
from profilehub.application.services.completeness import (
    calculate_overall_completeness,
)
from profilehub.domain.shared.dotted_path import flatten
from profilehub.domain.shared.exceptions import (
    EntityNotFoundError,
    PartialCascadeFailure,
    ValidationError,
)
from profilehub.domain.shared.time import utc_now

if TYPE_CHECKING:
    from profilehub.application.services.account_service import AccountService
    from profilehub.application.services.file_record_service import (
        FileRecordService,
    )
    from profilehub.application.services.profile_service import ProfileService
    from profilehub.application.services.settings_service import SettingsService

logger = logging.getLogger(__name__)


class UserDataService:
    """
    Aggregation over the account, profile, settings and file stores.

    Store errors propagate unchanged (fail fast), except in
    :meth:`delete_account_cascade`, which attempts every step and reports
    failures in its result.
    """

    def __init__(
        self,
        account_service: AccountService,
        profile_service: ProfileService,
        settings_service: SettingsService,
        file_service: FileRecordService,
    ):
        self._accounts = account_service
        self._profiles = profile_service
        self._settings = settings_service
        self._files = file_service

    async def get_complete_user_view(self, account_id: UUID) -> CompleteUserView:
        """Fetch everything stored about an account.

        The account is resolved first so a missing account never creates
        a default profile or settings row. The remaining four reads run
        concurrently and the first failure is raised.
        """
        account = await self._accounts.get_account(account_id)

        profile, settings, files, stats = await asyncio.gather(
            self._profiles.get_or_create(account_id),
            self._settings.get_or_create_defaults(account_id),
            self._files.list_by_owner(account_id),
            self._files.stats_by_owner(account_id),
        )

        return CompleteUserView(
            account=AccountDTO.from_account(account),
            profile=profile,
            settings=settings,
            files=files,
            file_stats=stats,
            overall_completeness=calculate_overall_completeness(
                account, profile, settings
            ),
        )

    async def delete_account_cascade(self, account_id: UUID) -> CascadeResult:
        """Delete an account with its profile, settings and files.

        Not transactional: every step is attempted even if an earlier one
        failed, and completed steps are not rolled back.
        """
        steps: list[tuple[CascadeStep, Callable[[UUID], Awaitable[Any]]]] = [
            (CascadeStep.FILES, self._files.delete_by_owner),
            (CascadeStep.SETTINGS, self._settings.delete),
            (CascadeStep.PROFILE, self._profiles.delete),
            (CascadeStep.ACCOUNT, self._accounts.delete),
        ]

        deleted: dict[CascadeStep, bool] = {}
        failed: dict[str, str] = {}
        files_deleted = 0

        for step, action in steps:
            try:
                outcome = await action(account_id)
            except EntityNotFoundError:
                deleted[step] = False
                continue
            except Exception as e:
                logger.warning(
                    "Cascade delete of %s for account %s failed: %s",
                    step.value,
                    account_id,
                    e,
                    exc_info=True,
                )
                failed[step.value] = str(e)
                continue

            if step == CascadeStep.FILES:
                files_deleted = outcome
                deleted[step] = outcome > 0
            else:
                deleted[step] = bool(outcome)

        failure = PartialCascadeFailure(failed) if failed else None
        if failure is not None:
            logger.warning("Account %s: %s", account_id, failure)
        else:
            logger.info(
                "Account %s deleted with %d files", account_id, files_deleted
            )

        return CascadeResult(
            account_id=account_id,
            deleted=deleted,
            files_deleted=files_deleted,
            failure=failure,
        )

    async def export_snapshot(
        self,
        account_id: UUID,
        format: Union[str, SnapshotFormat] = SnapshotFormat.JSON,
    ) -> Snapshot:
        """Serialize the complete view of an account.

        JSON exports wrap the view in an envelope with the export time;
        CSV exports are ``Field,Value`` rows of the flattened view.
        """
        snapshot_format = self._parse_format(format)
        view = await self.get_complete_user_view(account_id)
        data = view.to_dict()

        if snapshot_format == SnapshotFormat.CSV:
            content = self._to_csv(data)
        else:
            envelope = {
                "export_date": utc_now().isoformat(),
                "account_id": str(account_id),
                "format": snapshot_format.value,
                "data": data,
            }
            content = json.dumps(envelope, indent=2, ensure_ascii=False)

        logger.info(
            "Exported %s snapshot for account %s", snapshot_format.value, account_id
        )
        return Snapshot(account_id=account_id, format=snapshot_format, content=content)

    async def get_system_stats(self) -> SystemStats:
        accounts, total_profiles, total_files = await asyncio.gather(
            self._accounts.stats(),
            self._profiles.count(),
            self._files.count(),
        )
        return SystemStats(
            accounts=accounts,
            total_profiles=total_profiles,
            total_files=total_files,
        )

    @staticmethod
    def _parse_format(format: Union[str, SnapshotFormat]) -> SnapshotFormat:
        try:
            return SnapshotFormat(format)
        except ValueError:
            allowed = ", ".join(f.value for f in SnapshotFormat)
            msg = f"Unsupported export format: {format} (expected one of: {allowed})"
            raise ValidationError(msg, details={"format": str(format)}) from None

    @staticmethod
    def _to_csv(data: dict[str, Any]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Field", "Value"])
        for key, value in flatten(data):
            writer.writerow([key, "" if value is None else value])
        return buffer.getvalue()
