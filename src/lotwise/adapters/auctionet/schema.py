"""Auctionet items API payload schemas."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type UnixTimestamp = int


class AuctionetBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "Auctionet %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class AuctionetBid(AuctionetBaseModel):
    amount: float
    timestamp: UnixTimestamp | None = None


class AuctionetItem(AuctionetBaseModel):
    id: int
    title: str = ""
    currency: str | None = None
    estimate: float | None = None
    upper_estimate: float | None = None
    hammered: bool = False
    state: str | None = None
    ends_at: UnixTimestamp | None = None
    bids: list[AuctionetBid] = Field(default_factory=list["AuctionetBid"])
    reserve_met: bool | None = None
    company_id: int | None = None
    house: str | None = None
    url: str | None = None

    @property
    def leading_bid(self) -> float | None:
        if not self.bids:
            return None
        return self.bids[0].amount

    @property
    def sold_at(self) -> UnixTimestamp | None:
        if self.bids and self.bids[0].timestamp is not None:
            return self.bids[0].timestamp
        return self.ends_at


class Pagination(AuctionetBaseModel):
    total_entries: int = 0
    current_page: int | None = None
    total_pages: int | None = None


class ItemsResponse(AuctionetBaseModel):
    items: list[AuctionetItem] = Field(default_factory=list["AuctionetItem"])
    pagination: Pagination = Field(default_factory=Pagination)
