"""Launchers that hand a ``mailto:`` URI to the desktop's mail client."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Type

from ..errors import NoMUAError, UnknownLauncherError

logger = logging.getLogger(__name__)


def spawn_detached(argv: Sequence[str]) -> None:
    """Start ``argv`` in the background without waiting for it to exit."""

    kwargs: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }
    if os.name == "nt":
        kwargs["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
            subprocess, "CREATE_NEW_PROCESS_GROUP", 0
        )
    else:
        kwargs["start_new_session"] = True
    subprocess.Popen(list(argv), **kwargs)


class BaseLauncher(ABC):
    """A platform probe: decides whether it applies, then opens the URI."""

    name: str = ""

    @abstractmethod
    def applies(self) -> bool:
        """Return True when this launcher can run in the current environment."""

    @abstractmethod
    def launch(self, uri: str) -> None:
        """Ask the operating system to open ``uri``."""

    def __call__(self, uri: str) -> bool:
        if not self.applies():
            logger.debug("Launcher %s does not apply here", self.name)
            return False
        self.launch(uri)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ExecutableLauncher(BaseLauncher):
    """Launcher backed by a helper program that is looked up on ``PATH``."""

    executable: str = ""

    def resolve(self) -> Optional[str]:
        return shutil.which(self.executable)

    def launch(self, uri: str) -> None:
        path = self.resolve() or self.executable
        spawn_detached([path, uri])


class XdgOpenLauncher(ExecutableLauncher):
    """X11/Wayland desktops: ``xdg-open`` picks the preferred mail client."""

    name = "xdg"
    executable = "xdg-open"
    display_variables = ("DISPLAY", "WAYLAND_DISPLAY")

    def applies(self) -> bool:
        if not any(os.environ.get(variable) for variable in self.display_variables):
            return False
        return self.resolve() is not None


class MacOpenLauncher(ExecutableLauncher):
    name = "macos"
    executable = "open"

    def applies(self) -> bool:
        return sys.platform == "darwin" and self.resolve() is not None


class WindowsLauncher(BaseLauncher):
    """Native Windows uses ShellExecute; Cygwin goes through ``cygstart``."""

    name = "windows"
    cygwin_executable = "cygstart"

    def _has_startfile(self) -> bool:
        return sys.platform == "win32" and hasattr(os, "startfile")

    def _cygstart(self) -> Optional[str]:
        if sys.platform != "cygwin":
            return None
        return shutil.which(self.cygwin_executable)

    def applies(self) -> bool:
        return self._has_startfile() or self._cygstart() is not None

    def launch(self, uri: str) -> None:
        if self._has_startfile():
            os.startfile(uri)  # type: ignore[attr-defined]
            return
        spawn_detached([self._cygstart() or self.cygwin_executable, uri])


LAUNCHER_TYPES: Dict[str, Type[BaseLauncher]] = {
    XdgOpenLauncher.name: XdgOpenLauncher,
    MacOpenLauncher.name: MacOpenLauncher,
    WindowsLauncher.name: WindowsLauncher,
}

DEFAULT_LAUNCHER_ORDER = ("xdg", "macos", "windows")


class LauncherChain:
    """Ordered launchers; the first one that handles the URI wins."""

    def __init__(self, launchers: Iterable[BaseLauncher] = ()) -> None:
        self.launchers: List[BaseLauncher] = list(launchers)

    def __iter__(self) -> Iterator[BaseLauncher]:
        return iter(self.launchers)

    def __len__(self) -> int:
        return len(self.launchers)

    def append(self, launcher: BaseLauncher) -> None:
        self.launchers.append(launcher)

    def insert(self, index: int, launcher: BaseLauncher) -> None:
        self.launchers.insert(index, launcher)

    def names(self) -> List[str]:
        return [launcher.name for launcher in self.launchers]

    def launch(self, uri: str) -> BaseLauncher:
        """Open ``uri`` with the first applicable launcher and return it."""

        for launcher in self.launchers:
            if launcher(uri):
                logger.info("Opened %s with launcher %s", uri, launcher.name)
                return launcher
        logger.warning("No launcher could open %s (tried: %s)", uri, ", ".join(self.names()) or "none")
        raise NoMUAError(uri)


def create_launchers(names: Iterable[str] = DEFAULT_LAUNCHER_ORDER) -> LauncherChain:
    """Create a launcher chain from launcher names, keeping their order."""

    launchers: List[BaseLauncher] = []
    for name in names:
        launcher_type = LAUNCHER_TYPES.get(name)
        if launcher_type is None:
            raise UnknownLauncherError(
                f"Unknown launcher '{name}'. Available: {', '.join(LAUNCHER_TYPES)}"
            )
        launchers.append(launcher_type())
    return LauncherChain(launchers)


__all__ = [
    "BaseLauncher",
    "DEFAULT_LAUNCHER_ORDER",
    "ExecutableLauncher",
    "LAUNCHER_TYPES",
    "LauncherChain",
    "MacOpenLauncher",
    "WindowsLauncher",
    "XdgOpenLauncher",
    "create_launchers",
    "spawn_detached",
]
