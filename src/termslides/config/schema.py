"""
Configuration Schema for termslides

Pydantic models defining the presentation settings.
"""

from typing import Literal
from pydantic import BaseModel, Field, field_validator


class SeparatorConfig(BaseModel):
    """Rule printed before and after every slide."""
    char: str = Field("-", description="Character repeated to draw the rule")
    length: int = Field(20, ge=0, description="Number of characters in the rule")
    blank_lines: bool = Field(True, description="Surround the rule with blank lines")

    @field_validator('char', mode='before')
    @classmethod
    def single_character(cls, v):
        """Keep only the first character of the rule glyph."""
        if isinstance(v, str):
            if not v:
                raise ValueError("Separator char must not be empty")
            return v[0]
        return v

    def render(self) -> str:
        return self.char * self.length


class PresentationConfig(BaseModel):
    """Complete configuration for terminal presentations."""

    version: str = Field("1.0", description="Configuration schema version")
    width: int = Field(80, ge=10, description="Presentation width in columns")
    color: Literal['auto', 'always', 'never'] = Field(
        'auto',
        description="Emit ANSI styles always, never, or only on a terminal"
    )
    step: bool = Field(False, description="Wait for Enter between slides")
    separator: SeparatorConfig = Field(
        default_factory=SeparatorConfig,
        description="Slide separator rule"
    )
