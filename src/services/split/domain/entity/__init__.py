from .bill_split import BillSplit as BillSplit
from .person import Person as Person
