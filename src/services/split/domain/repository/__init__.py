from .split_state_repository import SplitStateRepository as SplitStateRepository
