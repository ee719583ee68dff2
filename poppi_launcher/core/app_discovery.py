"""Application discovery from XDG desktop entries.

This module provides:
1. Discovery of installed applications from .desktop files (via pyxdg)
2. The ApplicationIndex collection ranked by the fuzzy scorer
3. Exec line cleanup for launching an entry directly
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from xdg import BaseDirectory
from xdg.DesktopEntry import DesktopEntry
from xdg.Exceptions import ParsingError

from ..logging_config import log_timing
from ..models.application import DesktopApp
from .ranking import rank


logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20

_FIELD_CODE = re.compile(r"%[a-zA-Z]")


def clean_exec_command(exec_line: str) -> str:
    """Remove desktop-entry field codes (%f, %U, ...) from an Exec line."""
    cleaned = _FIELD_CODE.sub("", exec_line).replace("%%", "%")
    return " ".join(cleaned.split())


def default_desktop_dirs() -> List[Path]:
    """Application directories in XDG precedence order (user first)."""
    dirs = [Path(data_dir) / "applications" for data_dir in BaseDirectory.xdg_data_dirs]
    for fallback in (Path("/usr/share/applications"), Path("/usr/local/share/applications")):
        if fallback not in dirs:
            dirs.append(fallback)
    return dirs


class AppDiscovery:
    """Discover applications on the system."""

    def __init__(self, desktop_dirs: Optional[Sequence[Path]] = None):
        """Initialize app discovery.

        Args:
            desktop_dirs: Directories to scan, highest precedence first
                (default: XDG data dirs)
        """
        self.desktop_dirs = list(desktop_dirs) if desktop_dirs is not None else default_desktop_dirs()

    def discover_all(self) -> List[DesktopApp]:
        """Discover all visible desktop applications.

        A desktop file id found in an earlier directory shadows the same id
        in later directories, so user entries override system ones.

        Returns:
            List of DesktopApp objects sorted by name
        """
        apps: Dict[str, DesktopApp] = {}
        seen_ids = set()

        with log_timing("Discover applications", logger):
            for desktop_dir in self.desktop_dirs:
                if not desktop_dir.is_dir():
                    continue

                for desktop_file in sorted(desktop_dir.glob("*.desktop")):
                    if desktop_file.name in seen_ids:
                        continue
                    seen_ids.add(desktop_file.name)

                    app = self.parse_desktop_file(desktop_file)
                    if app is not None:
                        apps[desktop_file.name] = app

        logger.info(f"Discovered {len(apps)} applications in {len(self.desktop_dirs)} directories")
        return sorted(apps.values(), key=lambda a: (a.name.lower(), a.name))

    def parse_desktop_file(self, desktop_file: Path) -> Optional[DesktopApp]:
        """Parse a .desktop file and extract app information.

        Args:
            desktop_file: Path to .desktop file

        Returns:
            DesktopApp, or None when the entry is hidden, not an
            application, has no Exec line or cannot be parsed
        """
        try:
            entry = DesktopEntry(str(desktop_file))
        except (ParsingError, OSError, UnicodeDecodeError, ValueError) as e:
            logger.debug(f"Skipping unreadable desktop file {desktop_file}: {e}")
            return None

        if entry.getNoDisplay() or entry.getHidden():
            return None

        entry_type = entry.getType()
        if entry_type and entry_type != "Application":
            return None

        exec_cmd = entry.getExec()
        if not exec_cmd:
            return None

        name = entry.getName() or entry.getGenericName() or desktop_file.stem

        return DesktopApp(
            name=name,
            exec_command=exec_cmd,
            desktop_file=desktop_file,
            icon=entry.getIcon() or None,
            comment=entry.getComment() or None,
            terminal=bool(entry.getTerminal()),
        )


def _app_fields(app: DesktopApp) -> Iterable[Tuple[str, int]]:
    yield app.name_lower, 1
    yield app.comment_lower, 1


class ApplicationIndex:
    """Searchable application collection, immutable after construction."""

    def __init__(self, apps: Sequence[DesktopApp]):
        self._apps: Tuple[DesktopApp, ...] = tuple(
            sorted(apps, key=lambda a: (a.name.lower(), a.name))
        )

    def __len__(self) -> int:
        return len(self._apps)

    @property
    def apps(self) -> Tuple[DesktopApp, ...]:
        return self._apps

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> List[Tuple[DesktopApp, int]]:
        """Rank applications by the best score across name and comment.

        Args:
            query: Search text; empty returns the first ``limit`` apps by name
            limit: Maximum results

        Returns:
            (app, score) pairs, best first
        """
        return rank(self._apps, query.strip(), _app_fields, limit)
