"""Pydantic schemas for YAML segmenter configuration."""

from pydantic import BaseModel, Field
from typing import List, Literal

class ListMarkerSettings(BaseModel):
    """Shape of a leading enumerator such as "1.", "(1)" or "၁။"."""
    max_length: int = Field(default=10, ge=1, le=64,
                            description="Longest trimmed text (code points) still treated as a marker")
    openers: str = Field(default="(",
                         description="Characters a marker may start with besides a numeric digit")
    terminators: str = Field(default=".၊။", min_length=1,
                             description="Characters a marker must end with")

    class Config:
        extra = "forbid"

class AbbreviationSettings(BaseModel):
    """Short dotted fragments that never stand as their own sentence."""
    max_length: int = Field(default=4, ge=1, le=32,
                            description="Longest trimmed text (code points) treated as an abbreviation")
    terminator: str = Field(default=".", min_length=1, max_length=1,
                            description="Character an abbreviation must end with")

    class Config:
        extra = "forbid"

class SegmenterConfig(BaseModel):
    """Complete configuration for the segmentation engine."""
    version: int = Field(default=1, description="Config schema version")
    backend: Literal["uax29", "rules"] = Field(default="uax29",
                                               description="Boundary oracle family: uax29 (uniseg) or rules")
    list_markers: ListMarkerSettings = Field(default_factory=ListMarkerSettings)
    abbreviations: AbbreviationSettings = Field(default_factory=AbbreviationSettings)
    validate_boundaries: bool = Field(default=False,
                                      description="Check boundary oracle output covers the input exactly")
    
    class Config:
        extra = "forbid"  # Strict validation
        
    def validate_settings(self) -> List[str]:
        """Validate cross-field settings and return any issues."""
        issues = []

        if any(c.isspace() for c in self.list_markers.terminators):
            issues.append("List marker terminators must not contain whitespace")
        if any(c.isspace() for c in self.list_markers.openers):
            issues.append("List marker openers must not contain whitespace")
        if self.abbreviations.terminator.isspace():
            issues.append("Abbreviation terminator must not be whitespace")

        if self.version != 1:
            issues.append(f"Unsupported config version: {self.version}")

        return issues
