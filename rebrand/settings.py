# rebrand/settings.py
"""
Run configuration.

A validated pydantic model that the CLI builds from parsed arguments and
hands to the runner. The engine gets the replacement string from here as a
constructor argument.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rebrand.grammar import DEFAULT_TARGET
from rebrand.renamer import check_base_name


class RebrandSettings(BaseModel):
    """Options for one rebrand run."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default=Path("."), description="Directory to process")
    apply: bool = Field(default=False, description="Perform changes instead of previewing them")
    rewrite_contents: bool = Field(default=False, description="Also replace tokens inside text files")
    target: str = Field(default=DEFAULT_TARGET, description="Replacement text")
    verbose: bool = Field(default=False, description="Report skipped entries")
    classifier: Literal["auto", "mime", "heuristic"] = Field(
        default="auto", description="How text files are told apart from binaries"
    )
    normalize_whitespace: bool = Field(
        default=True, description="Fold whitespace runs in rewritten file contents"
    )

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        if not v:
            raise ValueError("target must not be empty")
        # The target ends up in base names, so it must be one itself
        return check_base_name(v)

    @property
    def mode_label(self) -> str:
        return "APPLY" if self.apply else "DRY-RUN"
