"""Field-name configuration shared by every depth operation.

Sample and interval records are plain mappings whose depth fields are
named by the caller.  :class:`DepthKeys` holds those names and
:meth:`DepthKeys.resolve` turns whatever the caller passed as ``opt``
into one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Union

from pygeodepth.utils.numeric import is_nonempty_str

# Option names accepted in ``opt`` mappings, mapped to DepthKeys fields.
OPTION_ALIASES: dict[str, str] = {
    "keyDepth": "key_depth",
    "keyDepthStart": "key_depth_start",
    "keyDepthEnd": "key_depth_end",
    "keyGroup": "key_group",
}


@dataclass(frozen=True)
class DepthKeys:
    """Names of the depth fields in sample and interval records.

    Args:
        key_depth: Center-depth field of a sample.
        key_depth_start: Start (top) depth field of an interval.
        key_depth_end: End (bottom) depth field of an interval.
        key_group: Field under which grouped samples are attached.
    """

    key_depth: str = "depth"
    key_depth_start: str = "depthStart"
    key_depth_end: str = "depthEnd"
    key_group: str = "rows"

    @classmethod
    def resolve(cls, opt: DepthKeysLike = None) -> DepthKeys:
        """Build a :class:`DepthKeys` from *opt*.

        *opt* may be ``None``, a :class:`DepthKeys`, or a mapping using
        either the camelCase option names (``keyDepth``...) or the
        snake_case field names.  Options that are not non-empty strings
        fall back to their defaults; unknown names are ignored.  Any
        other *opt* yields the defaults.
        """
        if isinstance(opt, DepthKeys):
            return opt
        if not isinstance(opt, Mapping):
            return cls()

        names = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for name, value in opt.items():
            attr = OPTION_ALIASES.get(name, name)
            if attr in names and is_nonempty_str(value):
                values[attr] = value
        return cls(**values)


DepthKeysLike = Union[DepthKeys, Mapping[str, Any], None]
