"""Hazard tier classification from curated override tables."""

from functools import cached_property

from pydantic import BaseModel, Field

from domain.schemas import HazardLevel


class HazardOverrides(BaseModel):
    """Curated hazard decisions. Always win over anything derived from the taxonomy."""

    avoid: list[str] = Field(default_factory=list)  # lowercase tags
    caution: list[str] = Field(default_factory=list)  # lowercase tags
    notes: dict[str, str] = Field(default_factory=dict)  # exact tag -> free text

    @cached_property
    def _avoid_set(self) -> frozenset[str]:
        return frozenset(self.avoid)

    @cached_property
    def _caution_set(self) -> frozenset[str]:
        return frozenset(self.caution)

    @property
    def collisions(self) -> list[str]:
        """Tags listed under both `avoid` and `caution`."""
        return sorted(self._avoid_set & self._caution_set)

    def classify(self, tag: str) -> HazardLevel:
        """
        Map a tag to its hazard tier.

        `avoid` is checked before `caution`, so a tag present in both resolves
        to `avoid`. Unlisted tags are `info`.

        Examples:
            >>> HazardOverrides(avoid=["en:e171"]).classify("EN:E171")
            'avoid'
            >>> HazardOverrides().classify("en:e300")
            'info'
        """
        t = tag.lower()
        if t in self._avoid_set:
            return "avoid"
        if t in self._caution_set:
            return "caution"
        return "info"

    def note_for(self, tag: str) -> str:
        # exact match, no case folding
        return self.notes.get(tag) or ""
