from pydantic import BaseModel, ConfigDict


class SongSchema(BaseModel):
    """Track metadata as stored in the ``songs`` table."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    artist: str
    album: str = ""
    album_cover: str = ""
    duration: int = 0
    release_date: str = ""
    popularity: int = 0
    preview_url: str = ""
    external_url: str = ""
