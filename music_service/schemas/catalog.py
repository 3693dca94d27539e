from pydantic import BaseModel
from typing import Dict, List, Optional


class CatalogTokenSchema(BaseModel):
    access_token: str
    token_type: str
    expires_in: int


class CatalogArtist(BaseModel):
    id: Optional[str] = None
    name: str


class CatalogImage(BaseModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


class CatalogAlbum(BaseModel):
    id: Optional[str] = None
    name: str = ""
    images: List[CatalogImage] = []
    release_date: str = ""


class CatalogTrack(BaseModel):
    id: str
    name: str
    artists: List[CatalogArtist] = []
    album: CatalogAlbum = CatalogAlbum()
    duration_ms: int = 0
    popularity: int = 0
    preview_url: Optional[str] = None
    external_urls: Dict[str, str] = {}
    uri: Optional[str] = None
