"""Client settings for the language server."""

from __future__ import annotations

import logging
from typing import Any

import param

from .constants import CONFIG_PROPS_KEY, CONFIG_SECTION

logger = logging.getLogger(__name__)


class PropsSettings(param.Parameterized):
    """Settings read from the ``reactLuauPropsHelper`` section of the client."""

    props = param.Dict(
        default=None,
        allow_None=True,
        doc="""
        Property names per element class, in suggestion order. Classes
        missing here (or mapped to an empty list) use the built-in list.""",
    )

    @classmethod
    def from_client_settings(cls, settings: Any) -> PropsSettings:
        """Build settings from a client payload, dropping anything malformed.

        Accepts either the section itself (``{"props": {...}}``) or the
        whole settings object with the section nested under its name.
        """
        if not isinstance(settings, dict):
            return cls()

        section = settings.get(CONFIG_SECTION, settings)
        if not isinstance(section, dict):
            logger.warning(f"Ignoring {CONFIG_SECTION} settings of type {type(section).__name__}")
            return cls()

        return cls(props=normalize_props(section.get(CONFIG_PROPS_KEY)))


def normalize_props(raw_props: Any) -> dict[str, list[str]] | None:
    """Clean a user property map into ``{class name: [property, ...]}``.

    Non-string property names are dropped and duplicates removed, keeping
    the first occurrence. Entries that are not lists are skipped.
    """
    if raw_props is None:
        return None
    if not isinstance(raw_props, dict):
        logger.warning(f"Ignoring '{CONFIG_PROPS_KEY}' setting: expected an object")
        return None

    props: dict[str, list[str]] = {}
    for class_name, names in raw_props.items():
        if not isinstance(names, list):
            logger.warning(f"Ignoring properties for {class_name}: expected a list")
            continue

        valid_names = [name for name in names if isinstance(name, str)]
        if len(valid_names) != len(names):
            logger.warning(f"Dropped non-string property names for {class_name}")

        props[str(class_name)] = list(dict.fromkeys(valid_names))
    return props
