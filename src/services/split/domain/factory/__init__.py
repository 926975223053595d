from .bill_split_factory import BillSplitFactory as BillSplitFactory
from .bill_split_factory import PersonDetails as PersonDetails
from .bill_split_factory import SplitDetails as SplitDetails
