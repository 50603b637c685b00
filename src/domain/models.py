"""Pydantic-powered settings for the fruit salad demo.

The defaults reproduce the classic run: three fruits are shuffled, three
more are appended, and one insert plus one remove are applied from
console input.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SaladSettings(BaseModel):
    """Configuration for building and editing the fruit salad sequence."""

    header: str = Field("Fruit salad:", description="Line printed before each rendering")
    initial_fruit: List[str] = Field(
        default_factory=lambda: ["Arbutus", "Loquat", "Strawberry Tree Berry"],
        description="Fruit placed in the salad before shuffling",
    )
    extra_fruit: List[str] = Field(
        default_factory=lambda: ["Pomegranate", "Fig", "Cherry"],
        description="Fruit appended after shuffling",
    )
    default_insert_value: str = Field(
        "Mango", min_length=1, description="Fruit inserted when the input line carries only an index"
    )
    shuffle: bool = Field(True, description="Shuffle the initial fruit before extending")
    seed: Optional[int] = Field(None, ge=0, description="Seed for a reproducible shuffle")
    separator: str = Field(", ", description="Separator placed between rendered items")

    @field_validator("initial_fruit", "extra_fruit")
    @classmethod
    def reject_blank_fruit(cls, value: List[str]) -> List[str]:
        if any(not item.strip() for item in value):
            raise ValueError("Fruit names must not be blank")
        return value

    def all_fruit(self) -> List[str]:
        """Return the unshuffled salad contents in build order."""

        return [*self.initial_fruit, *self.extra_fruit]
