from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from tmpkit.core.errors import ValidationError


class TempOptions(BaseModel):
    """Options accepted by every path-producing call.

    ``extension=None`` means no extension was given. ``extension=""`` is an
    explicit empty extension: it yields no suffix for a generated name but
    still conflicts with ``name``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = Field(None, description="final path segment; random when empty")
    extension: str | None = Field(None, description="suffix for generated names")

    def check(self) -> "TempOptions":
        if self.name and self.extension is not None:
            raise ValidationError("The `name` and `extension` options are mutually exclusive")
        if self.name and (os.sep in self.name or "/" in self.name or self.name in {".", ".."}):
            raise ValidationError(f"`name` must be a single path segment, got {self.name!r}")
        return self

    @property
    def suffix(self) -> str:
        if self.extension is None:
            return ""
        ext = self.extension.lstrip(".")
        return f".{ext}" if ext else ""


def coerce_options(options: TempOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> TempOptions:
    """Accept a TempOptions, a mapping or keyword arguments and validate them."""
    if isinstance(options, TempOptions) and not kwargs:
        return options.check()
    data = options.model_dump() if isinstance(options, TempOptions) else dict(options or {})
    data.update(kwargs)
    unknown = set(data) - set(TempOptions.model_fields)
    if unknown:
        raise ValidationError(f"Unknown option(s): {', '.join(sorted(unknown))}")
    try:
        opts = TempOptions(**data)
    except PydanticValidationError as e:
        raise ValidationError(str(e)) from e
    return opts.check()
