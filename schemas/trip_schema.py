from pydantic import BaseModel, Field
from typing import List, Optional

from schemas.packing_schema import Activity, NonBlankStr, PackingList, TripConditions


class TripCreate(TripConditions):
    """Schema for creating or updating a trip."""
    name: NonBlankStr = Field(..., examples=["Mountain Adventure"])
    destination: Optional[str] = Field(None, examples=["Yosemite National Park"])


class TripInfo(BaseModel):
    """Schema for returning trip information."""
    id: str
    name: str
    destination: Optional[str] = None
    duration: int
    temp_min: int
    temp_max: int
    activities: List[Activity] = []
    created_at: str
    packing_lists: List[PackingList] = []


class TripPlan(BaseModel):
    """Schema for a newly planned trip together with its generated list."""
    trip: TripInfo
    packing_list: PackingList
