"""Universities API schemas - raw dataset records."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UniversitySchema(BaseModel):
    """A university as published in the world universities dataset.

    Entries are community-maintained, so fields with an unexpected type are
    coerced or reset instead of rejecting the whole entry. Only the domain
    decides whether an entry is usable.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    country: str | None = None
    alpha_two_code: str | None = None
    state_province: str | None = Field(alias="state-province", default=None)
    domain: str | None = None
    domains: list[str | None] = []
    web_pages: list[str] = []

    @field_validator("name", "country", "alpha_two_code", "state_province", mode="before")
    @classmethod
    def coerce_text(cls, v):
        if isinstance(v, str) or v is None:
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None

    @field_validator("domain", mode="before")
    @classmethod
    def coerce_domain(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("domains", mode="before")
    @classmethod
    def coerce_domains(cls, v):
        # Position matters: only the first element is ever used
        if not isinstance(v, list):
            return []
        return [d if isinstance(d, str) else None for d in v]

    @field_validator("web_pages", mode="before")
    @classmethod
    def coerce_web_pages(cls, v):
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, str)]

    @property
    def primary_domain(self) -> str | None:
        """Singular `domain` when set, otherwise the first of `domains`; lowercased."""
        domain = self.domain or (self.domains[0] if self.domains else None)
        if not domain or not domain.strip():
            return None
        return domain.strip().lower()
