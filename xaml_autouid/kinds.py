# xaml_autouid/kinds.py
"""
@file kinds.py
@brief Eligible-kind set: element local names that receive automation ids.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional

import yaml
from jsonschema import Draft202012Validator

from .exceptions import ConfigError

_PACKAGE_DIR = os.path.dirname(__file__)
DEFAULT_KINDS_PATH = os.path.join(_PACKAGE_DIR, "data", "eligible_kinds.yaml")
KINDS_SCHEMA_PATH = os.path.join(_PACKAGE_DIR, "schemas", "kinds.schema.json")


class EligibleKinds:
    """
    Loads the eligible-kind YAML (``kinds: [...]``) and answers membership
    questions for element local names. Instances are immutable.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = os.path.abspath(path or DEFAULT_KINDS_PATH)
        raw = self._load_yaml(self.path)
        self._validate(raw, self.path)
        self._names: FrozenSet[str] = frozenset(raw["kinds"])

    @classmethod
    def from_names(cls, names: Iterable[str]) -> EligibleKinds:
        """Build a set directly from names, bypassing the YAML file."""
        inst = cls.__new__(cls)
        inst.path = None
        inst._names = frozenset(str(n) for n in names)
        return inst

    @staticmethod
    def _load_yaml(path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigError(f"Eligible kinds YAML not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Eligible kinds YAML must be a mapping at root.")
        return data

    @staticmethod
    def _load_schema() -> Dict[str, Any]:
        with open(KINDS_SCHEMA_PATH, "r", encoding="utf-8") as f:
            return json.load(f)

    @classmethod
    def _validate(cls, data: Dict[str, Any], where: str) -> None:
        validator = Draft202012Validator(cls._load_schema())
        errors = sorted(validator.iter_errors(data), key=lambda e: str(list(e.path)))
        if errors:
            lines = [f"{where}: eligible kinds validation failed:"]
            for e in errors:
                lines.append(f"- {list(e.path)}: {e.message}")
            raise ConfigError("\n".join(lines))

    def extend(self, names: Iterable[str]) -> EligibleKinds:
        """Return a new set with the extra names added."""
        merged = EligibleKinds.from_names(self._names | frozenset(names))
        merged.path = self.path
        return merged

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def __contains__(self, local_name: object) -> bool:
        return local_name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"EligibleKinds(path={self.path!r}, count={len(self._names)})"
