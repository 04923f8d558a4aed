"""Player input sources."""

from .keyboard import DEFAULT_BINDINGS, KeyboardInput

__all__ = [
    'DEFAULT_BINDINGS',
    'KeyboardInput',
]
