"""
Local Key-Value Store

Plays the role browser localStorage plays for a front-end: one JSON document
per string key, loaded at startup and rewritten in full on every mutation.

Keys used by the app:
- ptj:user              - current signed-in user (absent when signed out)
- ptj:jobs              - full job listing snapshot, newest first
- ptj:messages          - full message snapshot, newest first
- ptj:profile:<email>   - student profile, one per user

Writes go to a temp file in the same directory and are swapped in with
os.replace, so readers never see a half-written value.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar
from urllib.parse import quote, unquote

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError

from parttime_jobs.core.config import get_settings
from parttime_jobs.core.errors import CorruptEntryError
from parttime_jobs.core.log import get_logger

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def user_key(prefix: str = "ptj") -> str:
    return f"{prefix}:user"


def jobs_key(prefix: str = "ptj") -> str:
    return f"{prefix}:jobs"


def messages_key(prefix: str = "ptj") -> str:
    return f"{prefix}:messages"


def profile_key(email: str, prefix: str = "ptj") -> str:
    """Per-user profile key, scoped by email."""
    return f"{prefix}:profile:{email}"


class LocalStore:
    """
    JSON file per key under a single directory.

    Usage:
        store = LocalStore(Path(".ptj_storage"))
        store.save("ptj:jobs", [...])
        jobs = store.load("ptj:jobs")
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # ':' '@' '/' are not safe in file names on every platform
        return self.directory / f"{quote(key, safe='')}.json"

    def load(self, key: str) -> Optional[Any]:
        """
        Return the decoded value for key, or None if the key was never saved.

        Raises CorruptEntryError if the stored text is not valid JSON.
        """
        path = self._path(key)
        if not path.exists():
            return None
        raw = path.read_text(encoding="utf-8")
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptEntryError(f"Stored value for '{key}' is not valid JSON: {e}") from e

    def save(self, key: str, value: Any) -> None:
        """Serialize value and atomically replace whatever key held before."""
        payload = json.dumps(value, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path(key))
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
        log.debug("Saved %s", key)

    def remove(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink()
        log.debug("Removed %s", key)
        return True

    def keys(self) -> List[str]:
        return sorted(unquote(p.stem) for p in self.directory.glob("*.json") if not p.name.startswith(".tmp-"))

    # --------------------------------------------------------
    # Typed helpers: decode-or-default at the boundary
    # --------------------------------------------------------

    def load_model(self, key: str, model: Type[ModelT]) -> Optional[ModelT]:
        """Load key as a single model. Corrupt or incompatible values yield None."""
        try:
            data = self.load(key)
            if data is None:
                return None
            return model.model_validate(data)
        except (CorruptEntryError, SchemaError) as e:
            log.warning("Discarding unreadable value for %s: %s", key, e)
            return None

    def load_models(self, key: str, model: Type[ModelT]) -> Optional[List[ModelT]]:
        """Load key as a list of models. Corrupt or incompatible values yield None."""
        try:
            data = self.load(key)
            if data is None:
                return None
            return TypeAdapter(List[model]).validate_python(data)
        except (CorruptEntryError, SchemaError) as e:
            log.warning("Discarding unreadable value for %s: %s", key, e)
            return None

    def save_model(self, key: str, value: BaseModel) -> None:
        self.save(key, value.model_dump(mode="json"))

    def save_models(self, key: str, values: List[BaseModel]) -> None:
        self.save(key, [v.model_dump(mode="json") for v in values])

    def test_writable(self) -> bool:
        """Check the storage directory accepts writes."""
        probe = "__probe__"
        try:
            self.save(probe, True)
            return self.remove(probe)
        except OSError as e:
            log.error("Local store not writable: %s", e)
            return False


# Global store (one per process, like one browser profile)
_store: LocalStore = None


def get_local_store() -> LocalStore:
    """Get or create the local store (singleton pattern)"""
    global _store
    if _store is None:
        _store = LocalStore(get_settings().storage_dir)
    return _store
