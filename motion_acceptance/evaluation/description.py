# motion_acceptance/evaluation/description.py
"""
Test descriptions: the commanded move a recording is checked against.

Descriptions are authored as a mapping literal, either JSON (``.json`` files)
or a Python literal such as::

    {"start_time": 0.5, "duration": 2, "x_translation": 10}

Literals are read with ``ast.literal_eval``, which only builds constants and
containers. Nothing in a description is executed. Hyphenated keys
(``start-time``) are accepted as aliases of the underscored names.
"""

import ast
import collections.abc
import json
import logging
import math
import numbers
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..constants import AXES, MS_PER_SECOND
from ..exceptions import DescriptionLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestDescription:
    """Commanded move: timing in seconds, distances in device-native units"""
    start_time: float
    duration: float
    radius: Optional[float] = None
    x_rotation: float = 0
    y_rotation: float = 0
    z_rotation: float = 0
    x_translation: float = 0
    y_translation: float = 0
    z_translation: float = 0

    # Not a test class, despite the name.
    __test__ = False

    def axis_distances(self) -> List[Tuple[str, float]]:
        """(axis, distance) for all six axes, in AXES order. Omitted axes are 0."""
        return [(axis, getattr(self, axis)) for axis in AXES]

    def start_time_ms(self, time_scale: float = MS_PER_SECOND) -> float:
        return self.start_time * time_scale

    def duration_ms(self, time_scale: float = MS_PER_SECOND) -> float:
        return self.duration * time_scale

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], source: Optional[str] = None) -> "TestDescription":
        """
        Validate a parsed mapping and build a TestDescription.

        Raises:
            DescriptionLoadError: If required keys are missing, values are not
                                  numeric and finite, a key is given twice,
                                  or a move has no positive duration.
        """
        if not isinstance(mapping, collections.abc.Mapping):
            raise DescriptionLoadError(
                f"Test description must be a mapping, got {type(mapping).__name__}",
                source=source,
            )

        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in mapping.items():
            name = str(key).replace("-", "_")
            if name not in known:
                logger.warning(f"Ignoring unknown key '{key}' in test description {source}")
                continue
            if name in values:
                raise DescriptionLoadError(
                    f"Key '{key}' duplicates '{name}'", source=source
                )
            values[name] = value

        for required in ("start_time", "duration"):
            if required not in values:
                raise DescriptionLoadError(f"Missing required key '{required}'", source=source)

        for name, value in values.items():
            if name == "radius" and value is None:
                continue
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise DescriptionLoadError(
                    f"Value of '{name}' must be numeric, got {value!r}", source=source
                )
            if not math.isfinite(value):
                raise DescriptionLoadError(
                    f"Value of '{name}' must be finite, got {value!r}", source=source
                )

        if values["duration"] < 0:
            raise DescriptionLoadError("Duration cannot be negative", source=source)
        if values["duration"] == 0 and any(values.get(axis, 0) != 0 for axis in AXES):
            raise DescriptionLoadError(
                "A move with non-zero distance needs a positive duration", source=source
            )

        return cls(**values)


def parse_test_description(
    text: str, source: Optional[str] = None, fmt: Optional[str] = None
) -> TestDescription:
    """
    Parse description text.

    Args:
        text: The description text.
        source: Identifier of the test case, attached to any error.
        fmt: "json" or "literal". Defaults to "json" for sources ending in
             ``.json`` and "literal" otherwise.

    Raises:
        DescriptionLoadError: Wrapping any parse or validation failure.
    """
    if fmt is None:
        fmt = "json" if source and str(source).endswith(".json") else "literal"

    try:
        if fmt == "json":
            mapping = json.loads(text)
        elif fmt == "literal":
            mapping = ast.literal_eval(text.strip())
        else:
            raise DescriptionLoadError(f"Unknown description format '{fmt}'", source=source)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        raise DescriptionLoadError(
            f"Error loading test description: {exc}", source=source
        ) from exc

    return TestDescription.from_mapping(mapping, source=source)


def load_test_description(path: Union[str, Path]) -> TestDescription:
    """Read and parse the description file at `path`."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptionLoadError(
            f"Error loading test description: {exc}", source=str(path)
        ) from exc
    return parse_test_description(text, source=str(path))
