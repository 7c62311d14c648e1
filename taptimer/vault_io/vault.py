# taptimer/vault_io/vault.py
# Vault: a directory of markdown notes addressed by POSIX paths relative to its root

from __future__ import annotations

from pathlib import Path, PurePosixPath

from ..core.exceptions import FileOperationError, FileReadError, FileWriteError, NoteNotFoundError
from ..core.verbose import vlog_file_read, vlog_file_write


# * Host document storage for taptimer; every path argument is vault-relative (e.g. "Workouts/Legs.md")
class Vault:
    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser().resolve()

    def __repr__(self) -> str:
        return f"Vault({str(self.root)!r})"

    # map a vault path to the filesystem, refusing paths that escape the root
    def resolve(self, path: str) -> Path:
        relative = PurePosixPath(str(path).replace("\\", "/").lstrip("/"))
        target = (self.root / relative).resolve()
        if target != self.root and self.root not in target.parents:
            raise FileOperationError(f"Path escapes vault: {path}", target)
        return target

    # * Normalize a user-supplied path (absolute, cwd-relative or vault-relative) to a vault path
    def note_path_for(self, raw: str | Path) -> str:
        candidate = Path(raw).expanduser()
        if candidate.is_absolute() or candidate.exists():
            absolute = candidate.resolve()
            try:
                return absolute.relative_to(self.root).as_posix()
            except ValueError:
                raise FileOperationError(f"Path is outside the vault {self.root}: {raw}", absolute)
        return PurePosixPath(str(raw).replace("\\", "/").lstrip("/")).as_posix()

    def exists(self, path: str) -> bool:
        try:
            return self.resolve(path).exists()
        except FileOperationError:
            return False

    def is_note(self, path: str) -> bool:
        if not path:
            return False
        try:
            return self.resolve(path).is_file()
        except FileOperationError:
            return False

    def _require_note(self, note_path: str) -> Path:
        if not self.is_note(note_path):
            raise NoteNotFoundError(f"Note not found: {note_path}", note_path)
        return self.resolve(note_path)

    def read(self, note_path: str) -> str:
        target = self._require_note(note_path)
        try:
            text = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Cannot read note {note_path}: {e}", target) from e
        vlog_file_read(target, len(text))
        return text

    # overwrite an existing note
    def modify(self, note_path: str, text: str) -> None:
        target = self._require_note(note_path)
        self._write(target, text)

    # create a new note; parent folders must already exist
    def create(self, note_path: str, text: str) -> None:
        target = self.resolve(note_path)
        if target.exists():
            raise FileWriteError(f"File already exists: {note_path}", target)
        if not target.parent.is_dir():
            raise FileWriteError(f"Folder does not exist for {note_path}", target)
        self._write(target, text)

    def create_folder(self, path: str) -> None:
        target = self.resolve(path)
        try:
            target.mkdir()
        except OSError as e:
            raise FileWriteError(f"Cannot create folder {path}: {e}", target) from e

    def _write(self, target: Path, text: str) -> None:
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(f"Cannot write {target}: {e}", target) from e
        vlog_file_write(target, len(text))
