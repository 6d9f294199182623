from pydantic import BaseModel, field_validator


class SegmentResponse(BaseModel):
    segment: str

    @field_validator("segment")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("segment must not be empty")
        return value
