"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at construction time: a `Version` with a missing or
  negative component simply cannot exist.
- Frozen models give us immutable values that are safe to hand around.

Note:
- These models describe *what* was detected, not *how* it was detected.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

NOT_DETECTED = "<not detected>"


class Version(BaseModel):
    """Two-component libc version (`major.minor`).

    Patch/build metadata found in the source text is discarded on purpose.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(
        ...,
        ge=0,
        description="Major component (e.g. 2 for glibc 2.41).",
    )
    minor: int = Field(
        ...,
        ge=0,
        description="Minor component (e.g. 41 for glibc 2.41).",
    )

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class LibcVersions(BaseModel):
    """Detection outcome for one host.

    Both fields are independent: a host can report glibc, musl, both or neither.
    """

    model_config = ConfigDict(frozen=True)

    glibc: Version | None = Field(
        default=None,
        description="Detected glibc version, `None` when not detected.",
    )
    musl: Version | None = Field(
        default=None,
        description="Detected musl version, `None` when not detected.",
    )

    def as_dict(self) -> dict[str, str | None]:
        """JSON-friendly projection used by `--json` output."""

        return {
            "glibc": str(self.glibc) if self.glibc is not None else None,
            "musl": str(self.musl) if self.musl is not None else None,
        }

    def __str__(self) -> str:
        glibc = f"glibc {self.glibc}" if self.glibc is not None else f"glibc {NOT_DETECTED}"
        musl = f"musl {self.musl}" if self.musl is not None else f"musl {NOT_DETECTED}"
        return f"{glibc} | {musl}"
