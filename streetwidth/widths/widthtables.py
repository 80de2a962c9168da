"""Width unit tables and constants.

Widths are stored internally in a single canonical unit (feet), regardless of
the unit system the user displays them in. This module loads the unit suffix
table and the vulgar fraction table from ``data/widthconfig.yaml`` once per
process and freezes them.

Key Principles:
1. Canonical widths are never tagged with a unit
2. Conversion to/from metric happens only when parsing or formatting
3. Tables are ordered and read-only
"""

from __future__ import annotations

import logging
import os
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple, Union

from babel import Locale, UnknownLocaleError

from streetwidth.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STREETWIDTH_CONFIG"
LOCALE_ENV_VAR = "STREETWIDTH_LOCALE"

REQUIRED_KEYS = (
    "imperial_metric_multiplier",
    "metric_precision",
    "imperial_precision",
    "default_locale",
    "markup_break",
    "input_units",
    "vulgar_fractions",
)

FEET_MARKER = "'"
INCHES_MARKER = '"'


class UnitSystem(IntEnum):
    """Display/input unit system selected in user settings."""

    IMPERIAL = 1
    METRIC = 2

    @classmethod
    def coerce(cls, value: Any) -> Optional["UnitSystem"]:
        """Coerce a member, its integer value or its name to a UnitSystem.

        Examples:
            >>> UnitSystem.coerce(2)
            <UnitSystem.METRIC: 2>

            >>> UnitSystem.coerce("Imperial")
            <UnitSystem.IMPERIAL: 1>

            >>> UnitSystem.coerce("furlongs") is None
            True
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


class UnitToken(NamedTuple):
    """Unit suffix accepted in width input and its multiplier into feet."""

    text: str
    multiplier: float


class WidthConfig(NamedTuple):
    """Frozen width configuration."""

    imperial_metric_multiplier: float
    metric_precision: int
    imperial_precision: int
    default_locale: str
    markup_break: str
    input_units: Tuple[UnitToken, ...]
    vulgar_fractions: Mapping[str, str]
    glyph_to_decimal: Mapping[str, str]  # reverse of vulgar_fractions, in table order


def _unit_multipliers(imperial_metric_multiplier: float) -> Dict[str, float]:
    # Multipliers into feet for each named unit
    return {
        "meter": 1 / imperial_metric_multiplier,
        "centimeter": 1 / 100 / imperial_metric_multiplier,
        "inch": 1 / 12,
        "foot": 1,
    }


def _freeze_config(raw: Dict[str, Any], source: Path) -> WidthConfig:
    missing = [key for key in REQUIRED_KEYS if key not in raw]
    if missing:
        raise ValueError(f"Width config {source} is missing required keys: {', '.join(missing)}")

    ratio = float(raw["imperial_metric_multiplier"])
    if ratio <= 0:
        raise ValueError(f"imperial_metric_multiplier must be positive, got {ratio}")
    multipliers = _unit_multipliers(ratio)

    tokens = []
    for entry in raw["input_units"]:
        unit = entry.get("unit")
        if unit not in multipliers:
            raise ValueError(
                f"Unknown unit {unit!r} for suffix {entry.get('text')!r} in {source}. "
                f"Must be one of: {', '.join(multipliers)}"
            )
        tokens.append(UnitToken(str(entry["text"]), multipliers[unit]))

    fractions = MappingProxyType({str(k): str(v) for k, v in raw["vulgar_fractions"].items()})

    default_locale = os.environ.get(LOCALE_ENV_VAR) or str(raw["default_locale"])
    try:
        Locale.parse(default_locale.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(
            f"Invalid default_locale {default_locale!r} ({e}). "
            f"Set default_locale in {source} or ${LOCALE_ENV_VAR} to a known locale such as 'en'"
        ) from e

    return WidthConfig(
        imperial_metric_multiplier=ratio,
        metric_precision=int(raw["metric_precision"]),
        imperial_precision=int(raw["imperial_precision"]),
        default_locale=default_locale,
        markup_break=str(raw["markup_break"]),
        input_units=tuple(tokens),
        vulgar_fractions=fractions,
        glyph_to_decimal=MappingProxyType({g: d for d, g in fractions.items()}),
    )


@lru_cache(maxsize=4)
def load_width_config(path: Optional[Union[str, Path]] = None) -> WidthConfig:
    """Load and freeze the width tables.

    Args:
        path: Optional explicit config path. If None, uses $STREETWIDTH_CONFIG
              or the packaged ``widths/data/widthconfig.yaml``.

    Returns:
        WidthConfig with ordered, read-only tables

    Raises:
        FileNotFoundError: If no config file can be found
        ValueError: If the config is incomplete, names an unknown unit or
                    an unknown default locale
    """
    found = find_data_file(
        module_file=__file__,
        filenames=["widthconfig.yaml"],
        override=path,
        env_var=CONFIG_ENV_VAR,
    )

    if found is None:
        module_dir = Path(__file__).parent
        searched = []
        if path is not None:
            searched.append(("Explicit path", Path(path)))
        elif os.environ.get(CONFIG_ENV_VAR):
            searched.append((f"${CONFIG_ENV_VAR}", Path(os.environ[CONFIG_ENV_VAR])))
        searched.append(("Package data", module_dir / "data" / "widthconfig.yaml"))
        raise FileNotFoundError(format_not_found_error(
            subject="width configuration",
            searched_locations=searched,
            fix_instructions=[
                "Reinstall the package: pip install -e .",
                f"Or point {CONFIG_ENV_VAR} at a widthconfig.yaml file",
            ],
        ))

    logger.debug(f"Loading width config from {found}")
    return _freeze_config(load_yaml_file(found), found)


__all__ = [
    "UnitSystem",
    "UnitToken",
    "WidthConfig",
    "FEET_MARKER",
    "INCHES_MARKER",
    "load_width_config",
]
