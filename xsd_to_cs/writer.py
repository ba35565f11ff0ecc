"""
Atomic file writer for generated C# code.

Ensures that an interrupted write never leaves a half-written output file.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path


class CodeWriteError(Exception):
    """Raised when generated code fails validation before being written."""


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None, require_namespace: bool = True):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the C# code
            require_namespace: Whether to require a namespace declaration
        """
        self._validate = validate or self._default_validate
        self._require_namespace = require_namespace

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        The parent directory is created if missing.

        Raises:
            CodeWriteError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
        temp_path = Path(temp_path_str)

        try:
            # newline="" keeps the generated line endings untouched
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def _default_validate(self, content: str) -> None:
        """Basic structural checks on C# code.

        Raises:
            CodeWriteError: If validation fails
        """
        if self._require_namespace and "namespace " not in content:
            raise CodeWriteError("Generated C# code is missing namespace declaration")

        # Documentation comments may contain free text braces
        code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise CodeWriteError(f"Generated C# code has unbalanced braces: {open_braces} open, {close_braces} close")

        if "using " not in content:
            raise CodeWriteError("Generated C# code is missing using statements")
