"""Local persistence of the single session token.

Every store degrades instead of raising: an unreadable store reads as "no
token", a failed write leaves the user logged out on the next launch.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class SessionStore(ABC):
    @abstractmethod
    def get(self) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, token: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @property
    def state(self) -> SessionState:
        return SessionState.LOGGED_IN if self.get() else SessionState.LOGGED_OUT


class MemorySessionStore(SessionStore):
    def __init__(self, token: Optional[str] = None):
        self._token = token
        self._lock = threading.Lock()

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        with self._lock:
            self._token = token

    def clear(self) -> None:
        with self._lock:
            self._token = None


class FileSessionStore(SessionStore):
    """Token kept in one owner-only file (0600) under an owner-only directory."""

    FILE_MODE = 0o600
    DIR_MODE = 0o700

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def get(self) -> Optional[str]:
        try:
            # read back exactly what set() wrote
            with open(self.path, encoding="utf-8", newline="") as fh:
                token = fh.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Could not read session token from %s: %s", self.path, e)
            return None
        return token or None

    def set(self, token: str) -> None:
        try:
            self.path.parent.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(token)
            # O_CREAT mode is ignored for an existing file
            os.chmod(self.path, self.FILE_MODE)
        except OSError as e:
            logger.error("Could not persist session token to %s: %s", self.path, e)

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove session token %s: %s", self.path, e)
            # fall back to blanking it so get() still reads as logged out
            try:
                self.path.write_text("", encoding="utf-8")
            except OSError:
                logger.warning("Could not blank session token %s", self.path)
