"""Durable profile collection storage."""

import fcntl
import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

import orjson
import structlog

from ..errors import PersistenceError
from ..models.profile import Profile

STORE_VERSION = 1


@dataclass
class StoredProfiles:
    """Profile collection as read from storage."""
    profiles: list[Profile] = field(default_factory=list)
    active_profile_id: Optional[str] = None


class ProfileStore:
    """
    JSON file backed profile store.

    The whole collection is rewritten on every save. Writes go to a temporary
    file in the same directory which is then renamed over the target, so a
    reader sees either the previous or the new collection.
    """

    def __init__(self, path: str = "satsignal_profiles.json"):
        self.path = Path(path)
        self.logger = structlog.get_logger("profile.store")
        self._lock = threading.Lock()

    def load(self) -> StoredProfiles:
        """
        Load the profile collection.

        Returns:
            StoredProfiles; empty when the file does not exist yet

        Raises:
            PersistenceError: If the file cannot be read or parsed
        """
        if not self.path.exists():
            return StoredProfiles()

        try:
            with self._lock:
                raw = self.path.read_bytes()
            data = orjson.loads(raw) if raw.strip() else []
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error("Failed to load profiles", path=str(self.path), error=str(e))
            raise PersistenceError(
                f"Cannot load profiles: {e}",
                operation="load",
                target=str(self.path)
            )

        # A bare list is the legacy shape with the first profile active
        if isinstance(data, list):
            records, active_id = data, None
        elif isinstance(data, dict):
            records = data.get("profiles") or []
            active_id = data.get("activeProfileId")
        else:
            raise PersistenceError(
                "Profile file has unexpected structure",
                operation="load",
                target=str(self.path)
            )

        profiles = self._parse_records(records)

        known_ids = {p.id for p in profiles}
        active_id = str(active_id) if active_id is not None else None
        if active_id not in known_ids:
            active_id = profiles[0].id if profiles else None

        self.logger.info(
            "Loaded profiles",
            path=str(self.path),
            profile_count=len(profiles),
            active_profile_id=active_id
        )
        return StoredProfiles(profiles=profiles, active_profile_id=active_id)

    def save(self, profiles: Sequence[Profile], active_profile_id: Optional[str]) -> None:
        """
        Rewrite the whole collection.

        Raises:
            PersistenceError: If the write fails; the previous file is left intact
        """
        payload = orjson.dumps(
            {
                "version": STORE_VERSION,
                "activeProfileId": active_profile_id,
                "profiles": [p.to_dict() for p in profiles],
            },
            option=orjson.OPT_INDENT_2
        )

        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._atomic_write(payload)
            except OSError as e:
                self.logger.error("Failed to save profiles", path=str(self.path), error=str(e))
                raise PersistenceError(
                    f"Cannot save profiles: {e}",
                    operation="save",
                    target=str(self.path)
                )

        self.logger.debug(
            "Saved profiles",
            path=str(self.path),
            profile_count=len(profiles),
            active_profile_id=active_profile_id
        )

    def _atomic_write(self, payload: bytes) -> None:
        lock_path = self.path.with_name(self.path.name + ".lock")
        with open(lock_path, "a") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.path.parent,
                    prefix=f".{self.path.name}.",
                    suffix=".tmp"
                )
                try:
                    with os.fdopen(fd, "wb") as tmp:
                        tmp.write(payload)
                        tmp.flush()
                        os.fsync(tmp.fileno())
                    os.replace(tmp_name, self.path)
                except BaseException:
                    if os.path.exists(tmp_name):
                        os.unlink(tmp_name)
                    raise
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def _parse_records(self, records: Any) -> list[Profile]:
        profiles = []
        if not isinstance(records, list):
            return profiles

        for index, record in enumerate(records):
            if not isinstance(record, dict) or record.get("id") in (None, ""):
                self.logger.warning(
                    "Skipping stored profile without id",
                    index=index
                )
                continue
            profiles.append(Profile.from_dict(record))

        return profiles
