from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Comment:
    """A comment embedded in a post. `info` holds the client-supplied fields."""
    id: Optional[str]
    info: Dict[str, Any] = field(default_factory=dict)
