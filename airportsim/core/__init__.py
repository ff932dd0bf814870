"""Core data types and the priority-ordering engine."""

from airportsim.core.aircraft import Aircraft, Heading
from airportsim.core.ordering import Comparator, comes_before, service_key
from airportsim.core.priority_queue import PriorityQueue
from airportsim.core.queue_policy import QueuePolicy
from airportsim.core.runway import Runway, RunwaySlot

__all__ = [
    "Aircraft",
    "Comparator",
    "Heading",
    "PriorityQueue",
    "QueuePolicy",
    "Runway",
    "RunwaySlot",
    "comes_before",
    "service_key",
]
