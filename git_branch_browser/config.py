"""Configuration handling for git-branch-browser"""

from dataclasses import dataclass

from git_branch_browser.models.branch import DEFAULT_MAX_DEPTH
from git_branch_browser.models.catalog import SortMode, TypeFilter


@dataclass
class Config:
    """Configuration for git-branch-browser with validation."""

    # History window loaded per branch
    max_depth: int = DEFAULT_MAX_DEPTH

    # Initial list state
    default_filter: str = "local"  # local, remote, all
    default_sort: str = "date-desc"  # name-asc, name-desc, date-asc, date-desc

    # Render commit times in the committer's own UTC offset instead of UTC
    apply_utc_offset: bool = False

    # Execution modes
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_max_depth()
        self._validate_default_filter()
        self._validate_default_sort()

    def _validate_max_depth(self):
        """Validate max_depth is positive."""
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    def _validate_default_filter(self):
        """Validate default_filter is one of allowed values."""
        allowed = [f.value for f in TypeFilter]
        if self.default_filter not in allowed:
            raise ValueError(f"default_filter must be one of {allowed}, got '{self.default_filter}'")

    def _validate_default_sort(self):
        """Validate default_sort is one of allowed values."""
        allowed = [s.value for s in SortMode]
        if self.default_sort not in allowed:
            raise ValueError(f"default_sort must be one of {allowed}, got '{self.default_sort}'")

    @property
    def type_filter(self) -> TypeFilter:
        return TypeFilter(self.default_filter)

    @property
    def sort_mode(self) -> SortMode:
        return SortMode(self.default_sort)

    def to_dict(self) -> dict:
        return {
            "max_depth": self.max_depth,
            "default_filter": self.default_filter,
            "default_sort": self.default_sort,
            "apply_utc_offset": self.apply_utc_offset,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "max_depth",
            "default_filter",
            "default_sort",
            "apply_utc_offset",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
