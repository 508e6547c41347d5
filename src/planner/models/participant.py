from pydantic import BaseModel, Field


class Participant(BaseModel):
    id: str
    trip_id: str | None = None
    email: str
    name: str | None = None
    is_confirmed: bool = False
    is_owner: bool = False


class ParticipantConfirmation(BaseModel):
    participant_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
