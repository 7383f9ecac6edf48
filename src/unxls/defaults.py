# region ---[ Default CLI Options ]---

from unxls.types import ColorMode, SortKey

DEFAULT_RUN_PATH = "."
DEFAULT_SHOW_ALL = False
DEFAULT_ALMOST_ALL = False
DEFAULT_IGNORE_BACKUPS = False
DEFAULT_DIRECTORY_ONLY = False
DEFAULT_RECURSIVE = False
DEFAULT_GROUP_DIRECTORIES_FIRST = False
DEFAULT_IGNORE_FILTER: list[str] = []
DEFAULT_HIDE_FILTER = None
DEFAULT_COLOR = ColorMode.NEVER
DEFAULT_COLOR_WHEN_BARE = ColorMode.ALWAYS
DEFAULT_SORT = SortKey.NAME
DEFAULT_JOBS = 1

COLOR_CHOICES = [mode.value for mode in ColorMode]
SORT_CHOICES = [key.value for key in SortKey]

# endregion ---[ Default CLI Options ]---
# region ---[ Names ]---

BACKUP_SUFFIX = "~"
DOT_ENTRIES = (".", "..")

# endregion ---[ Names ]---
# region ---[ Colors ]---

COLORS = {
    "DIRECTORY": "\033[01;34m",  # Bold blue
    "SYMLINK": "\033[01;36m",  # Bold cyan
    "RESET": "\033[0m",
}

# endregion ---[ Colors ]---
