"""
Custom exception hierarchy for hexkeys.

```
HexKeysError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   ├── ConfigValidationError
│   └── UnknownLayoutError
└── DeviceSyncError
```

All custom exceptions carry a `user_message` for display, a
`technical_message` for logs, and an optional `recovery_hint`.
"""

from .base import HexKeysError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    UnknownLayoutError,
)
from .device import DeviceSyncError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "HexKeysError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "UnknownLayoutError",
    # Device
    "DeviceSyncError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
