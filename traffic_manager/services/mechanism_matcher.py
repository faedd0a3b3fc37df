"""Mechanism comparison"""

from collections import Counter
from typing import Sequence
from ..models.agent import Mechanism


def mechanisms_are_equivalent(a: Sequence[Mechanism], b: Sequence[Mechanism]) -> bool:
    """
    Check whether two mechanism lists advertise the same capabilities.
    
    Lists are compared as multisets of mechanism names, so order does not
    matter but duplicates do. An empty list is never equivalent to anything,
    not even another empty list: an agent without mechanisms is not ready.
    
    Args:
        a: Mechanisms of the first agent
        b: Mechanisms of the second agent
    
    Returns:
        True if both lists hold the same names with the same counts
    """
    if not a or not b:
        return False
    return Counter(m.name for m in a) == Counter(m.name for m in b)
