from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.models.course import INT_MAX, INT_MIN


class CourseIn(BaseModel):
    """
    PUT 是整筆覆蓋：沒給的欄位會回到預設值，不會保留舊資料
    """
    code: str = Field(..., min_length=1, max_length=20, description="課程代碼 (主鍵)")
    name: Optional[str] = Field(default=None, max_length=255)
    hours: int = Field(default=0, ge=INT_MIN, le=INT_MAX)
    price: int = Field(default=0, ge=INT_MIN, le=INT_MAX)


class CourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: Optional[str] = None
    hours: int
    price: int
