"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic so an interrupted run never leaves
a half-written declarations file behind.
"""

from __future__ import annotations

import os
import re
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputValidationError

_STRING_LITERAL = re.compile(r'"(?:\\.|[^"\\])*"')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_rust: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_rust: Optional validation function for Rust code
        """
        self._validate_rust = validate_rust or self._default_validate_rust

    def write(
        self,
        path: Path,
        content: str,
        language: str = "rust",
        validate: bool = True,
    ) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            language: Language for validation
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self._validate_content(content, language)

            # mkstemp creates 0600; keep the mode the target had or would get
            os.chmod(temp_path, _target_mode(path))
            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def _validate_content(self, content: str, language: str) -> None:
        if language == "rust":
            self._validate_rust(content)

    def _default_validate_rust(self, content: str) -> None:
        """Default Rust validation.

        Args:
            content: Rust code to validate

        Raises:
            OutputValidationError: If validation fails
        """
        code_lines = [_STRING_LITERAL.sub('""', line) for line in content.splitlines() if not line.lstrip().startswith("//")]
        code = "\n".join(code_lines)

        if "use serde::" not in code:
            raise OutputValidationError("Generated Rust code is missing the serde import")

        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated Rust code has unbalanced braces: {open_braces} open, {close_braces} close")


def write_plain(path: Path, content: str) -> None:
    """Write content directly, without the temporary-file step."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)


def _target_mode(path: Path) -> int:
    """Permission bits of the existing target, or the umask default for a new file."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
