from __future__ import annotations
import os

# sentinel language code: detect the language from the fragment text
AUTO_LANGUAGE: str = "auto"
DEFAULT_LANGUAGE: str = "en"

# dialect used when a document or fragment names one we have no collaborator for
DEFAULT_DIALECT: str = "plaintext"

# language codes that may address a bundled word list
LANGUAGE_CODE_PATTERN: str = r"^[-A-Za-z]+$"

# word list resource naming
RESOURCE_TEMPLATE: str = "completionList.{code}.txt"
RESOURCE_PACKAGE: str = "wordcomplete.data"
ENCODING: str = "utf-8"

# where the process-wide word list cache reads from:
# - "package://dotted.name"  bundled package data
# - "file:///some/dir"       a directory on disk
# - "memory://"              nothing (embedders seed their own loader)
RESOURCE_DSN: str = os.environ.get("COMPLETION_RESOURCE_DSN", f"package://{RESOURCE_PACKAGE}")

# INFO logging on engine construction (set COMPLETION_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("COMPLETION_VERBOSE") == "1"
