"""
Input validation schemas using Pydantic for the grocery list API.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Literal, Optional


def _clean_strings(v):
    return [s.strip() for s in v if isinstance(s, str) and s.strip()]


class HouseholdInput(BaseModel):
    """Schema for household composition."""
    totalMembers: Optional[int] = Field(None, ge=0, le=50)
    adultCount: Optional[int] = Field(None, ge=0, le=50)
    hasChildren: Optional[bool] = None
    childrenAges: List[int] = Field(default_factory=list)

    @field_validator('childrenAges')
    @classmethod
    def validate_ages(cls, v):
        """Ages must be non-negative."""
        if any(age < 0 for age in v):
            raise ValueError('Children ages cannot be negative')
        return v


class BudgetInput(BaseModel):
    """Schema for the weekly budget; `priority` is the strictness."""
    weekly: float = Field(0, ge=0)
    currency: str = Field('USD', min_length=1, max_length=8)
    priority: Literal['strict', 'flexible'] = 'flexible'


class FavoriteIngredientsInput(BaseModel):
    proteins: List[str] = Field(default_factory=list)
    vegetables: List[str] = Field(default_factory=list)
    fruits: List[str] = Field(default_factory=list)
    grains: List[str] = Field(default_factory=list)

    @field_validator('proteins', 'vegetables', 'fruits', 'grains')
    @classmethod
    def strip_names(cls, v):
        return _clean_strings(v)


class DietaryInput(BaseModel):
    """Schema for dietary preferences."""
    restrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    cuisinePreferences: List[str] = Field(default_factory=list)
    favoriteIngredients: FavoriteIngredientsInput = Field(default_factory=FavoriteIngredientsInput)
    dislikedFoods: List[str] = Field(default_factory=list)

    @field_validator('restrictions', 'allergies', 'cuisinePreferences', 'dislikedFoods')
    @classmethod
    def strip_entries(cls, v):
        """Remove blank entries."""
        return _clean_strings(v)


class ShoppingPreferencesInput(BaseModel):
    organic: Literal['yes', 'when_affordable', 'no'] = 'no'


class UserProfileInput(BaseModel):
    """Schema for the profile fragment the grocery engine consumes."""
    household: HouseholdInput = Field(default_factory=HouseholdInput)
    budget: BudgetInput = Field(default_factory=BudgetInput)
    dietary: DietaryInput = Field(default_factory=DietaryInput)
    shoppingPreferences: ShoppingPreferencesInput = Field(default_factory=ShoppingPreferencesInput)


class GenerateListInput(BaseModel):
    """Schema for a grocery list generation request."""
    userId: str = Field(..., min_length=1, max_length=128)
    profile: UserProfileInput

    @field_validator('userId')
    @classmethod
    def strip_user(cls, v):
        if not v.strip():
            raise ValueError('userId cannot be empty')
        return v.strip()


class ItemUpdateInput(BaseModel):
    """Schema for toggling a grocery item."""
    checked: Optional[bool] = None
    purchased: Optional[bool] = None

    @model_validator(mode='after')
    def require_one_field(self):
        if self.checked is None and self.purchased is None:
            raise ValueError('Provide checked and/or purchased')
        return self

    def fields(self) -> dict:
        return self.model_dump(exclude_none=True)
