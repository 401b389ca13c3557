from .protocols import FifoContainer, LifoContainer
from .queue import Queue
from .queue_from_stacks import QueueFromStacks
from .stack import Stack
from .stack_from_queues import StackFromQueues

__all__ = [
    "FifoContainer",
    "LifoContainer",
    "Queue",
    "QueueFromStacks",
    "Stack",
    "StackFromQueues",
]
