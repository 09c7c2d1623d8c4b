"""Small utility functions."""

import hashlib
import json
from enum import Enum
from typing import Any


def hash_text(text: str) -> str:
    """Create a stable hash of text content."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]


def safe_json(obj: Any, indent: int = 2) -> str:
    """Safely serialize result objects to JSON, keeping non-ASCII text readable."""
    def serialize_item(item):
        if isinstance(item, Enum):
            return item.value
        elif hasattr(item, 'to_dict'):  # result model node
            return item.to_dict()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()
                    if not k.startswith('_')}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item
    
    try:
        return json.dumps(serialize_item(obj), indent=indent, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
