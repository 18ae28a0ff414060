from pydantic import BaseModel

from artifactlib.models.card import CardSet, CardSetJson


class ExpirationWrapper(BaseModel):
    """
    On-disk cache envelope for one card set.

    Attributes:
        expire_time: Unix timestamp (seconds) after which the set is stale
        card_set_json: The card set document as served by the API
    """

    expire_time: int
    card_set_json: CardSetJson

    @property
    def set_id(self) -> int:
        return self.card_set_json.card_set.set_info.set_id

    @property
    def card_set(self) -> CardSet:
        return self.card_set_json.card_set

    def is_fresh(self, now: int) -> bool:
        """True if the envelope expires strictly after `now`."""
        return self.expire_time > now


class SetRedirect(BaseModel):
    """Descriptor returned by the card set endpoint pointing at the CDN copy."""

    cdn_root: str
    url: str
    expire_time: int

    @property
    def card_set_url(self) -> str:
        return f"{self.cdn_root}{self.url}"
