"""
File-backed token store: one <slot>.txt per slot, raw token text, no envelope.
Read and write are separate phases; write goes through a temp file + os.replace so
a concurrent reader sees either the old or the new token, never a partial one.
"""
import logging
import os
import tempfile
from pathlib import Path

from token_cache.errors import StoreUnavailable

logger = logging.getLogger(__name__)

_SUFFIX = ".txt"


def check_slot_name(slot: str) -> str:
    """Slot names select a file; reject anything that could escape the token directory."""
    if not slot or slot in (".", "..") or "/" in slot or "\\" in slot or "\x00" in slot:
        raise ValueError(f"Invalid slot name: {slot!r}")
    return slot


class FileTokenStore:
    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{check_slot_name(slot)}{_SUFFIX}"

    def read(self, slot: str) -> str:
        """Stored token for slot, or "" when the slot has never been written."""
        path = self.path_for(slot)
        try:
            # newline="" so the token comes back byte-for-byte
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            logger.debug("Token slot %s not found at %s; treating as empty", slot, path)
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise StoreUnavailable(slot, str(e)) from e

    def write(self, slot: str, value: str) -> None:
        """Replace the slot's contents with value."""
        path = self.path_for(slot)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{slot}.", suffix=".tmp", dir=path.parent)
            with open(fd, "w", encoding="utf-8", newline="") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise StoreUnavailable(slot, str(e)) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary token file %s", tmp_name)
        logger.debug("Wrote token slot %s (%s)", slot, "empty" if not value else "set")
