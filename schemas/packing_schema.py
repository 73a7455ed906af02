from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator
from typing import Annotated, Dict, List, Literal, Optional

Activity = Literal["camping", "cycling", "hiking"]
Category = Literal["camping", "cycling", "hiking", "hygiene", "clothes", "common", "devices", "others"]
Priority = Literal["high", "medium", "low"]


def _non_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_non_blank)]


class TripConditions(BaseModel):
    """Trip attributes the packing list is generated from."""
    duration: int = Field(..., ge=1, le=30, examples=[7])
    temp_min: int = Field(..., examples=[10])
    temp_max: int = Field(..., examples=[22])
    activities: List[Activity] = Field(default_factory=list, examples=[["hiking", "camping"]])

    @field_validator("activities")
    @classmethod
    def dedupe_activities(cls, value):
        return list(dict.fromkeys(value))

    @model_validator(mode="after")
    def check_temperature_range(self):
        if self.temp_min > self.temp_max:
            raise ValueError("temp_min must not be greater than temp_max")
        return self


class TempRange(BaseModel):
    min: int
    max: int


class ItemTemplate(BaseModel):
    """Schema for a row of the packing template table."""
    name: str
    category: Category
    base_quantity: int
    activities: List[Activity] = []
    temp_range: Optional[TempRange] = None
    priority: Priority


class GeneratedItem(BaseModel):
    """Schema for an item produced by the generator, before it is saved."""
    id: str
    name: str
    category: Category
    quantity: int
    packed: bool = False
    priority: Priority


class PackingItemCreate(BaseModel):
    """Schema for adding an item to a packing list."""
    name: NonBlankStr = Field(..., examples=["Sunglasses"])
    category: Category = "others"
    quantity: int = Field(1, ge=1)
    packed: bool = False
    priority: Priority = "medium"
    notes: Optional[str] = None


class PackingItemUpdate(BaseModel):
    """Schema for a partial item update. Only the fields sent are changed."""
    name: Optional[str] = None
    category: Optional[Category] = None
    quantity: Optional[int] = Field(None, ge=1)
    packed: Optional[bool] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return _non_blank(value) if value is not None else value

    @model_validator(mode="after")
    def reject_null_fields(self):
        for field in ("name", "category", "quantity", "packed", "priority"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} must not be null")
        return self


class PackingItem(BaseModel):
    """Schema for a single saved item in a packing list."""
    id: str
    packing_list_id: str
    name: str = Field(..., examples=["Rain jacket"])
    category: Category = Field(..., examples=["clothes"])
    quantity: int = 1
    packed: bool = False
    priority: Priority = "medium"
    notes: Optional[str] = None


class PackingListCreate(BaseModel):
    """Schema for saving a packing list for a trip."""
    trip_id: str
    name: NonBlankStr = Field(..., examples=["Mountain Adventure - Packing List"])
    items: List[PackingItemCreate] = []


class PackingListReplace(BaseModel):
    """Schema for replacing the name and every item of a packing list."""
    name: NonBlankStr
    items: List[PackingItemCreate] = []


class PackingListGenerateRequest(BaseModel):
    """Schema for requesting a generated list for a saved trip."""
    trip_id: str = Field(..., examples=["-OTVlf-luH-4fDZGx2ll"])
    name: Optional[NonBlankStr] = None


class PackingList(BaseModel):
    """Schema for returning a full packing list."""
    id: str
    trip_id: str
    name: str
    items: List[PackingItem]
    created_at: str
    updated_at: str


class CategoryProgress(BaseModel):
    packed: int
    total: int
    percent: int


class PackingProgress(BaseModel):
    """Schema for the packed/total summary of a list."""
    packed: int
    total: int
    percent: int
    by_category: Dict[str, CategoryProgress] = {}
