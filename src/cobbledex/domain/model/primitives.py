"""Domain primitives: scalar aliases shared by the species and progress models."""

from __future__ import annotations

type SpeciesKey = str
type NationalNumber = int
type Generation = int
type AspectTag = str
