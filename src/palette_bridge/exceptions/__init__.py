"""
Custom exception hierarchy for Palette Bridge.

## Exception Hierarchy

```
PaletteBridgeError (base)
├── PaletteError
│   ├── UnknownPaletteError
│   └── InvalidColorError
└── StateError
    ├── StateFileInvalidError
    └── StateValidationError
```

All custom exceptions carry a `user_message`, a `technical_message` for
logs, a `recoverable` flag and an optional `recovery_hint`.

### Example: Rejected import

```python
from palette_bridge.exceptions import StateError
from palette_bridge.palette import import_state

try:
    state = import_state(text)
except StateError as e:
    print(e.get_full_message())  # current state is left as it was
```

Resolution misses, malformed pasted lines and unsupported shade labels are
not errors: the color core reports them as absent values.
"""

from .base import PaletteBridgeError
from .handlers import format_error_for_display, wrap_pydantic_error
from .palette import InvalidColorError, PaletteError, UnknownPaletteError
from .state import StateError, StateFileInvalidError, StateValidationError

__all__ = [
    # Base
    "PaletteBridgeError",
    # Palette
    "InvalidColorError",
    "PaletteError",
    "UnknownPaletteError",
    # State
    "StateError",
    "StateFileInvalidError",
    "StateValidationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
