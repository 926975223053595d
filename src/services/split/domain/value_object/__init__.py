from .person_id import PersonId
from .price import parse_price
from .stay_period import StayPeriod

__all__ = ["PersonId", "StayPeriod", "parse_price"]
