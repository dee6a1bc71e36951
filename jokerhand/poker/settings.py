from __future__ import annotations

from dataclasses import dataclass

import yaml

from .cards import JOKER_TOKEN

# Numeric ranks a standard deck prints; J/Q/K/A are always accepted
NUMBER_FLOOR = 2
NUMBER_CEILING = 10


@dataclass(frozen=True, slots=True)
class Settings:
    name: str = "Standard deck"
    example: str = f"S-2 H-A D-J {JOKER_TOKEN} C-10"
    prompt: str = "input: "
    min_number: int = NUMBER_FLOOR
    max_number: int = NUMBER_CEILING

    @classmethod
    def from_yaml(cls, path: str) -> "Settings":
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Settings file {path} is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must hold a mapping")

        defaults = cls()
        name = str(data.get("name", defaults.name))
        example = data.get("example", defaults.example)
        prompt = data.get("prompt", defaults.prompt)
        min_number = data.get("min_number", defaults.min_number)
        max_number = data.get("max_number", defaults.max_number)

        for k, v in (("example", example), ("prompt", prompt)):
            if not isinstance(v, str):
                raise ValueError(f"Invalid {k}: {v!r}")

        for k, v in (("min_number", min_number), ("max_number", max_number)):
            # bool is an int subclass
            if not isinstance(v, int) or isinstance(v, bool):
                raise ValueError(f"Invalid {k}: {v!r}")
            if v < NUMBER_FLOOR or v > NUMBER_CEILING:
                raise ValueError(f"{k} must be within {NUMBER_FLOOR}..{NUMBER_CEILING}, got {v}")

        if min_number > max_number:
            raise ValueError(f"min_number {min_number} is above max_number {max_number}")

        return cls(
            name=name,
            example=example,
            prompt=prompt,
            min_number=min_number,
            max_number=max_number,
        )
