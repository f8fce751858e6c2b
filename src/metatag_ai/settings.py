from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from metatag_ai import config
from metatag_ai.errors import SettingsError
from metatag_ai.helpers import parse_bool, safe_str, split_csv

# Shape of the stored settings record (see settings_from_env for the env mapping).
SETTINGS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "enabled": {"type": "boolean"},
        "default_provider": {"type": ["string", "null"]},
        "persona": {"type": ["string", "null"]},
        "enabled_bundles": {
            "type": ["array", "null"],
            "items": {"type": "string"},
        },
    },
    "additionalProperties": True,
}


@dataclass(frozen=True)
class GenerationSettings:
    enabled: bool = False
    provider_option: str = ""
    persona: str = ""
    enabled_content_types: frozenset[str] = field(default_factory=frozenset)

    @property
    def effective_persona(self) -> str:
        return self.persona.strip() or config.DEFAULT_PERSONA

    def allows_content_type(self, bundle: str) -> bool:
        """An empty selection enables every content type."""
        if not self.enabled_content_types:
            return True
        return bundle in self.enabled_content_types

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "GenerationSettings":
        try:
            validate(instance=dict(raw), schema=SETTINGS_SCHEMA)
        except _SchemaValidationError as e:
            raise SettingsError(
                f"AI meta description settings are invalid: {e.message}"
            ) from e

        # A stored literal "None" counts as unset, same as a missing value.
        return cls(
            enabled=bool(raw.get("enabled", False)),
            provider_option=safe_str(raw.get("default_provider")).strip(),
            persona=safe_str(raw.get("persona")),
            enabled_content_types=frozenset(raw.get("enabled_bundles") or ()),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "default_provider": self.provider_option,
            "persona": self.persona,
            "enabled_bundles": sorted(self.enabled_content_types),
        }


SettingsSource = Callable[[], GenerationSettings]


def settings_from_env() -> GenerationSettings:
    """Settings built from the METATAG_AI_* variables loaded by ``config``."""
    return GenerationSettings.from_mapping(
        {
            "enabled": parse_bool(config.ENABLED),
            "default_provider": config.DEFAULT_PROVIDER,
            "persona": config.PERSONA,
            "enabled_bundles": split_csv(config.ENABLED_BUNDLES),
        }
    )


class StaticSettingsSource:
    """Settings source over a mutable mapping owned by the caller.

    The mapping is re-validated on every call so edits made by the settings
    store are picked up by the next generation.
    """

    def __init__(self, store: Optional[Mapping[str, Any]] = None) -> None:
        self._store = store if store is not None else {}

    def __call__(self) -> GenerationSettings:
        return GenerationSettings.from_mapping(self._store)
