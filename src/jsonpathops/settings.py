"""
Parser configuration.

The default settings reproduce the lenient grammar: empty field names are
accepted and malformed digit runs silently become ``0``. Strict settings turn
both into syntax errors.
"""

from pydantic import BaseModel, ConfigDict


class PathSettings(BaseModel):
    """
    Options controlling how path expressions are parsed.

    Params:
        strict_fields: Reject empty field names such as ``$.`` or ``$..a``
        strict_indices: Reject empty or unparseable digit runs in ``[...]``
            and in the bare digit shorthand, and trailing text after the
            shorthand. The append marker ``[#]`` is always accepted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_fields: bool = False
    strict_indices: bool = False

    @classmethod
    def strict(cls) -> "PathSettings":
        """Settings with every strictness option enabled."""
        return cls(strict_fields=True, strict_indices=True)


DEFAULT_SETTINGS = PathSettings()
