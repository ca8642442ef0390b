import json
import os
import stat
import tempfile
from pathlib import Path

from gmsa_portal.domain.requests.entities import RequestRecord


class FilesystemRequestStore:
    """
    RequestStore backed by a single JSON file.

    Expected layout:
        <data_dir>/
          requests.json    # JSON array of records, camelCase keys

    The file is rewritten wholesale on every save. The new content goes to a
    temporary file in the same directory and is moved into place with
    os.replace, so readers never see a partially written collection. An
existing file keeps its permission bits across the rewrite. A new file is
created owner read/write only.
    """

    def __init__(self, *, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[RequestRecord]:
        if not self._path.exists():
            return []
        data = json.loads(self._path.read_text(encoding="utf-8"))
        return [RequestRecord.model_validate(item) for item in data]

    def save_all(self, records: list[RequestRecord]) -> None:
        payload = json.dumps(
            [r.model_dump(mode="json", by_alias=True) for r in records],
            indent=2,
            ensure_ascii=False,
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            try:
                tmp_file.write(payload)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            except BaseException:
                tmp_file.close()
                tmp_path.unlink(missing_ok=True)
                raise

        try:
            if self._path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self._path.stat().st_mode))
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
