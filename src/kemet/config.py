"""Search configuration and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from kemet.utils.files import has_extension
from kemet.utils.text import printable

DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    "txt",
    "json",
    "cs",
    "sql",
    "config",
    "rs",
    "py",
    "js",
    "ts",
    "html",
    "css",
    "xml",
)

# Root arguments that mean "search the current directory".
_CWD_ALIASES = {"", ".", "*"}


class ConfigError(ValueError):
    """Raised when search parameters are missing or invalid."""


def normalize_extensions(
    raw: Union[str, Iterable[str], None],
    default: Tuple[str, ...] = DEFAULT_EXTENSIONS,
) -> Tuple[str, ...]:
    """Normalize an extension filter into lower-case suffixes without dots.

    Accepts a comma-separated string or an iterable of values. Blank entries are
    dropped and duplicates collapse onto their first occurrence. When nothing is
    left the ``default`` table is used instead.
    """
    if raw is None:
        return default
    values = raw.split(",") if isinstance(raw, str) else raw

    normalized: list[str] = []
    for value in values:
        ext = value.strip().lstrip(".").lower()
        if ext and ext not in normalized:
            normalized.append(ext)
    return tuple(normalized) if normalized else default


def resolve_root(raw: Union[str, Path, None], base_dir: Optional[Path] = None) -> Path:
    """Resolve the search root, falling back to ``base_dir`` or the cwd."""
    base = base_dir if base_dir is not None else Path.cwd()
    if raw is None or str(raw).strip() in _CWD_ALIASES:
        root = base
    else:
        root = Path(raw).expanduser()

    if not root.exists():
        raise ConfigError(f"Path does not exist: {printable(str(root))}")
    if not root.is_dir():
        raise ConfigError(f"Path is not a directory: {printable(str(root))}")
    return root


@dataclass(frozen=True, slots=True)
class SearchConfig:
    root: Path
    query: str
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    case_sensitive: bool = False
    show_lines: bool = False
    output: Path | None = None

    def __post_init__(self) -> None:
        if not self.query or not self.query.strip():
            raise ConfigError("Search text is required")
        if not self.extensions:
            raise ConfigError("At least one extension is required")

    @classmethod
    def from_inputs(
        cls,
        *,
        query: Optional[str],
        root: Union[str, Path, None] = None,
        extensions: Union[str, Iterable[str], None] = None,
        case_sensitive: bool = False,
        show_lines: bool = False,
        output: Union[str, Path, None] = None,
        base_dir: Optional[Path] = None,
        default_extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS,
    ) -> "SearchConfig":
        """Build a validated config from raw command-line style values."""
        if query is None or not query.strip():
            raise ConfigError("Search text is required")
        return cls(
            root=resolve_root(root, base_dir),
            query=query,
            extensions=normalize_extensions(extensions, default_extensions),
            case_sensitive=case_sensitive,
            show_lines=show_lines,
            output=Path(output) if output is not None else None,
        )

    def matches_extension(self, path: Path) -> bool:
        return has_extension(path, self.extensions)
