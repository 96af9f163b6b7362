from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field, field_validator


def _normalize_tag(tag: str) -> str:
    return str(tag).strip().upper()


class ClassificationConfig(BaseModel):
    """Hand-maintained lookup tables for feeders that do not follow the numbering scheme."""

    feeder_labels: Dict[int, str] = Field(
        default_factory=lambda: {1203: "THEISS 3", 1209: "THEISS 9"},
        description="Display name per feeder number, replacing 'Feeder {n}'.",
    )
    substation_overrides: Dict[int, str] = Field(
        default_factory=lambda: {1203: "THEISS", 1209: "THEISS"},
        description="Substation tag per feeder whose substation is not feeder // 100.",
    )
    substation_labels: Dict[str, str] = Field(
        default_factory=dict,
        description="Optional display name per substation key.",
    )

    model_config = {"frozen": True}

    @field_validator("substation_overrides")
    @classmethod
    def _normalize_override_tags(cls, v: Dict[int, str]) -> Dict[int, str]:
        out = {}
        for feeder, tag in v.items():
            tag = _normalize_tag(tag)
            if not tag:
                raise ValueError(f"substation override for feeder {feeder} is blank")
            out[feeder] = tag
        return out

    @field_validator("substation_labels")
    @classmethod
    def _normalize_label_keys(cls, v: Dict[str, str]) -> Dict[str, str]:
        return {_normalize_tag(k): label for k, label in v.items()}

    @property
    def override_tags(self) -> frozenset:
        return frozenset(self.substation_overrides.values())

    @classmethod
    def from_file(cls, path: str | Path) -> "ClassificationConfig":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return cls.model_validate(json.loads(p.read_text(encoding="utf-8")))


DEFAULT_CONFIG = ClassificationConfig()
