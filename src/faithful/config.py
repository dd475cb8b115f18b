"""ContextVar-based render configuration for faithful.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Entry points read the active config unless an explicit one is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config for one call
    from faithful import render
    from faithful.config import RenderConfig

    text = str(render(stream, config=RenderConfig(newline="\\r\\n")))

    # Or for every render in a block
    with render_config_context(RenderConfig(column_base=1)):
        text = str(render(stream))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        newline: Line terminator emitted for every line the cursor advances
        column_base: Index of the first column in the tokenizer's convention
            (0 for 0-indexed columns, 1 for 1-indexed columns)
        max_depth: Maximum Group nesting depth, or None for no limit

    """

    newline: str = "\n"
    column_base: int = 0
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not self.newline:
            raise ValueError("newline must be a non-empty string")
        if self.column_base < 0:
            raise ValueError(f"column_base must be >= 0, got {self.column_base}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0 or None, got {self.max_depth}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "newline": "\\r\\n",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.newline
            '\\r\\n'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(newline="\\r\\n")):
        ...     text = str(render(stream))

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


def resolve_config(config: RenderConfig | None) -> RenderConfig:
    """Return ``config`` if given, otherwise the active context config."""
    return config if config is not None else _render_config.get()


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    "resolve_config",
]
