from .entity import BillSplit as BillSplit
from .entity import Person as Person
from .factory import BillSplitFactory as BillSplitFactory
from .factory import SplitDetails as SplitDetails
from .repository import SplitStateRepository as SplitStateRepository
from .service import PersonCost as PersonCost
from .value_object import PersonId as PersonId
from .value_object import StayPeriod as StayPeriod
