from typing import List

from pydantic import BaseModel, ConfigDict, Field

from music_service.schemas.song import SongSchema


class PlaylistCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class PlaylistUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class PlaylistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int
    songs: List[SongSchema] = []


class PlaylistCreated(BaseModel):
    status: str = "ok"
    id: int
