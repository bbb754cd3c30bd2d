"""YAML loader for format profiles, with position tracking for error reporting."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from yamlemit.models.errors import SourceSpan
from yamlemit.models.profile import FormatProfile

logger = logging.getLogger("yamlemit.parser")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 64_000  # characters
_MAX_DEPTH = 4

# Matches & at line start or after whitespace/indicators, followed by an
# anchor name.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)


class ProfileError(Exception):
    """Raised when a format profile cannot be loaded.

    ``span`` points at the offending key when the position is known.
    """

    def __init__(
        self, message: str, span: SourceSpan | None = None, path: str | None = None
    ) -> None:
        self.message = message
        self.span = span
        self.path = path
        location = f" ({span.file}:{span.line}:{span.column})" if span else ""
        super().__init__(f"{message}{location}")


class ProfileLoader:
    """Loads a flat ``option: value`` YAML mapping into a :class:`FormatProfile`.

    Uses ruamel.yaml so every key keeps its line/column for error messages.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.preserve_quotes = True
        # Profiles are flat; reject anything nested deeper than this.
        self._yaml.max_depth = _MAX_DEPTH

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str, filename: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise ProfileError(
                f"Format profile exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)",
                SourceSpan(file=filename, line=1, column=1),
            )
        if _ANCHOR_RE.search(content):
            raise ProfileError("YAML anchors/aliases are not supported in format profiles")

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> FormatProfile:
        """Load a format profile file."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> FormatProfile:
        """Load a format profile from a string."""
        self._check_yaml_safety(content, filename)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise ProfileError(f"Invalid YAML: {exc}") from exc
        except RecursionError as exc:
            raise ProfileError(
                "Format profile is nested too deeply",
                SourceSpan(file=filename, line=1, column=1),
            ) from exc
        if data is None:
            return FormatProfile()
        if not isinstance(data, CommentedMap):
            raise ProfileError(
                "Format profile must be a mapping of option names to values",
                SourceSpan(file=filename, line=1, column=1),
            )

        values: dict[str, Any] = {}
        for key in data:
            value = data[key]
            if isinstance(value, (dict, list)):
                raise ProfileError(
                    f"Option '{key}' must be a scalar value",
                    self._key_span(data, key, filename),
                    path=str(key),
                )
            values[str(key)] = self._to_plain_value(value)

        try:
            profile = FormatProfile.model_validate(values)
        except ValidationError as exc:
            first = exc.errors()[0]
            key = str(first["loc"][0]) if first["loc"] else None
            span = self._key_span(data, key, filename) if key in data else None
            raise ProfileError(f"Invalid format profile: {first['msg']}", span, path=key) from exc

        logger.debug("Loaded format profile from %s: %s", filename, sorted(values))
        return profile

    # -- helpers -------------------------------------------------------------

    @staticmethod
    def _key_span(data: CommentedMap, key: Any, filename: str) -> SourceSpan | None:
        try:
            line, col = data.lc.key(key)
        except (AttributeError, KeyError, TypeError):
            return None
        return SourceSpan(file=filename, line=line + 1, column=col + 1)

    @staticmethod
    def _to_plain_value(value: Any) -> Any:
        """Strip ruamel scalar subclasses (quoted strings, hex ints)."""
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return str(value)
        if isinstance(value, int):
            return int(value)
        return value
