"""Pydantic schema for the flags produced by checks."""

from pydantic import BaseModel, ConfigDict

from tagcheck.schemas.feature import Feature


class Flag(BaseModel):
    """A feature that failed a check, with the instruction shown to editors."""

    model_config = ConfigDict(frozen=True)

    check_name: str
    feature: Feature
    instruction: str

    @property
    def identifier(self) -> str:
        """Stable id shared by every flag a check raises for one logical entity."""
        return f"{self.check_name}-{self.feature.logical_id}"

    def __hash__(self) -> int:
        return hash((self.check_name, self.feature, self.instruction))
