"""UserSettings aggregate: preferences and their audit trail."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping
from uuid import UUID

from profilehub.domain.settings.value_objects import (
    UNKNOWN_ACTOR,
    AppearanceSettings,
    CommunicationSettings,
    DataManagementSettings,
    GeneralSettings,
    IntegrationSettings,
    NotificationSettings,
    PrivacySettings,
    SecuritySettings,
    SettingChange,
)
from profilehub.domain.shared.dotted_path import (
    flatten,
    replace_path,
    resolve_path,
    split_path,
)
from profilehub.domain.shared.exceptions import PathNotFoundError
from profilehub.domain.shared.serialization import to_primitive
from profilehub.domain.shared.time import utc_now


@dataclass
class UserSettings:
    """User settings aggregate.

    This aggregate is keyed by account_id (not a generated ID). Leaf
    settings are addressed by dotted paths such as
    ``notifications.email.enabled``; every write goes through
    :meth:`update_setting` so it lands in ``change_history``.
    """

    account_id: UUID
    general: GeneralSettings = field(default_factory=GeneralSettings)
    privacy: PrivacySettings = field(default_factory=PrivacySettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    security: SecuritySettings = field(default_factory=SecuritySettings)
    appearance: AppearanceSettings = field(default_factory=AppearanceSettings)
    data_management: DataManagementSettings = field(
        default_factory=DataManagementSettings
    )
    communication: CommunicationSettings = field(default_factory=CommunicationSettings)
    integrations: IntegrationSettings = field(default_factory=IntegrationSettings)
    custom_settings: dict[str, Any] = field(default_factory=dict)
    change_history: list[SettingChange] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # Top-level fields addressable by a setting path
    GROUPS = (
        "general",
        "privacy",
        "notifications",
        "security",
        "appearance",
        "data_management",
        "communication",
        "integrations",
        "custom_settings",
    )

    @classmethod
    def default(cls, account_id: UUID) -> "UserSettings":
        """Create default settings for an account."""
        return cls(account_id=account_id)

    def get(self, path: str) -> Any:
        """Return the current value at a setting path."""
        self._check_root(path)
        return resolve_path(self, path)

    def update_setting(
        self,
        path: str,
        value: Any,
        changed_by: str | None = None,
    ) -> SettingChange:
        """Set one leaf setting and record the change.

        The value is validated before anything is recorded, so a rejected
        write leaves both the settings and the history untouched.

        Raises
        ------
        PathNotFoundError
            If the path does not exist in the settings shape
        ValidationError
            If the path names a group or the value does not fit
        """
        root = self._check_root(path)
        old_value = resolve_path(self, path)
        updated = replace_path(self, path, value)
        new_value = resolve_path(updated, path)

        change = SettingChange(
            setting_path=path,
            old_value=to_primitive(old_value),
            new_value=to_primitive(new_value),
            changed_by=changed_by or UNKNOWN_ACTOR,
        )
        self.change_history.append(change)
        setattr(self, root, getattr(updated, root))
        self.updated_at = change.changed_at
        return change

    def update_settings(
        self,
        changes: Mapping[str, Any],
        changed_by: str | None = None,
    ) -> list[SettingChange]:
        """Apply several leaf updates, all validated before any is applied."""
        staged = UserSettings(
            **{f.name: getattr(self, f.name) for f in fields(self)},
        )
        staged.change_history = list(self.change_history)
        recorded = [staged.update_setting(p, v, changed_by) for p, v in changes.items()]

        for f in fields(self):
            setattr(self, f.name, getattr(staged, f.name))
        return recorded

    def reset(self, changed_by: str | None = None) -> list[SettingChange]:
        """Restore defaults, recording one history entry per changed leaf."""
        defaults = UserSettings.default(self.account_id)
        actor = changed_by or UNKNOWN_ACTOR
        now = utc_now()

        recorded: list[SettingChange] = []
        for group in self.GROUPS:
            current = dict(flatten(to_primitive(getattr(self, group)), f"{group}."))
            target = dict(flatten(to_primitive(getattr(defaults, group)), f"{group}."))
            for path in sorted(current.keys() | target.keys()):
                if current.get(path) == target.get(path):
                    continue
                recorded.append(
                    SettingChange(
                        setting_path=path,
                        old_value=current.get(path),
                        new_value=target.get(path),
                        changed_by=actor,
                        changed_at=now,
                    )
                )
            setattr(self, group, getattr(defaults, group))

        self.change_history.extend(recorded)
        self.updated_at = now
        return recorded

    def history(self, limit: int | None = None) -> list[SettingChange]:
        """Return change history, newest first."""
        entries = list(reversed(self.change_history))
        return entries if limit is None else entries[:limit]

    def _check_root(self, path: str) -> str:
        root = split_path(path)[0]
        if root not in self.GROUPS:
            raise PathNotFoundError(path, root)
        return root
