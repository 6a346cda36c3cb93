"""
Bundled resource loading.

Bundled files ship with the package and are read-only; unlike the stores,
a missing or malformed bundled file is a packaging bug and raises.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from appsui.exceptions import ResourceDecodeError, ResourceNotFoundError

__all__ = ["DATA_DIR", "load_json", "decode_resource", "parse_date"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Directory holding the JSON files bundled with this package
DATA_DIR = Path(__file__).parent / "data"

# Launch dates and similar are stored as e.g. "1969-07-16"
_DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a bundled ``YYYY-MM-DD`` string; None stays None."""
    if value is None:
        return None
    return datetime.strptime(value, _DATE_FORMAT).date()


def load_json(name: str, data_dir: Optional[Path] = None) -> Any:
    """
    Read and parse the bundled file *name*.

    Raises:
        ResourceNotFoundError: no such file.
        ResourceDecodeError:   file is not valid JSON.
    """
    path = (data_dir or DATA_DIR) / name
    if not path.is_file():
        raise ResourceNotFoundError(f"Failed to locate {name} in bundle.")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ResourceDecodeError(f"Failed to load {name} from bundle: {exc}") from exc


def decode_resource(
    name: str,
    decode: Callable[[Any], T],
    data_dir: Optional[Path] = None,
) -> T:
    """
    Load *name* and convert it with *decode*.

    Raises:
        ResourceNotFoundError / ResourceDecodeError
    """
    raw = load_json(name, data_dir)
    try:
        result = decode(raw)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ResourceDecodeError(f"Failed to decode {name} from bundle: {exc}") from exc
    logger.debug("Decoded bundled resource %s", name)
    return result
