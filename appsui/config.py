"""
AppConfig — runtime configuration shared by stores, screens and the CLI.

The documents directory is the application-private location every store
writes under.  It defaults to ``~/.appsui/Documents`` and can be redirected
with the ``APPSUI_DOCUMENTS`` environment variable (or ``--documents`` on the
command line).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

__all__ = ["AppConfig", "DEFAULT_DOCUMENTS_DIR", "DOCUMENTS_ENV_VAR"]

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENTS_DIR = "~/.appsui/Documents"
DOCUMENTS_ENV_VAR     = "APPSUI_DOCUMENTS"


@dataclass
class AppConfig:
    """Runtime configuration for appsui."""
    documents_dir: str   = DEFAULT_DOCUMENTS_DIR
    defaults_file: str   = "defaults.json"        # "UserDefaults" equivalent
    json_indent:   Optional[int] = None           # None = compact output
    http_timeout:  float = 15.0                   # seconds, single attempt
    wikipedia_url: str   = "https://en.wikipedia.org/w/api.php"
    orders_url:    str   = "https://reqres.in/api/cupcakes"

    @classmethod
    def from_env(cls, documents_dir: Optional[str] = None) -> "AppConfig":
        """
        Build a config, resolving the documents directory.

        Precedence: explicit *documents_dir* > $APPSUI_DOCUMENTS > default.
        """
        chosen = documents_dir or os.environ.get(DOCUMENTS_ENV_VAR) or DEFAULT_DOCUMENTS_DIR
        logger.debug("Documents directory: %s", chosen)
        return cls(documents_dir=chosen)

    @property
    def documents_path(self) -> Path:
        """Expanded documents directory (not created until first write)."""
        return Path(self.documents_dir).expanduser()

    def document(self, name: str) -> Path:
        """Path of the durable file *name* inside the documents directory."""
        return self.documents_path / name

    @property
    def defaults_path(self) -> Path:
        return self.document(self.defaults_file)
