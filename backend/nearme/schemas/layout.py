from pydantic import BaseModel, Field

from nearme.modules.layouts import ConfigBundle, HeroCopy


class LayoutOut(BaseModel):
    category: str
    dedicated: bool
    bundle: ConfigBundle
    hero: HeroCopy | None = None


class LayoutValidationOut(BaseModel):
    categories: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
