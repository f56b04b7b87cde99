from instagram_api.schemas.base import InstagramModel


class InstagramLocation(InstagramModel):
    id: str
    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    street_address: str | None = None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)
