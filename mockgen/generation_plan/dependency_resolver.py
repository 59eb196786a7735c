"""
Dependency Resolver
===================

Orders tables so that each table is generated after the tables it
references.

Public Interface:
-----------------
    def topological_sort(dependencies: dict[str, list[str]]) -> list[str]

Cycle Policy:
-------------
Depth-first traversal with explicit per-node state. An edge that leads back
into a node still IN_PROGRESS is dropped: the first edge encountered wins.
The traversal therefore always terminates and returns every table exactly
once, but tables on a cycle are NOT guaranteed a referentially-safe order.
"""

from enum import Enum


# =============================================================================
# VISIT STATE
# =============================================================================

class VisitState(Enum):
    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def topological_sort(dependencies: dict[str, list[str]]) -> list[str]:
    """
    Return the tables in generation order (dependencies first).

    Tables are visited in the order the mapping lists them, which decides
    the relative order of independent tables.

    Args:
        dependencies: table name -> names of the tables it depends on.

    Returns:
        List containing every table exactly once.
    """
    state: dict[str, VisitState] = {}
    order: list[str] = []

    for root in dependencies:
        if state.get(root, VisitState.UNVISITED) is not VisitState.UNVISITED:
            continue

        # Explicit stack of (node, iterator over its dependencies)
        state[root] = VisitState.IN_PROGRESS
        stack = [(root, iter(dependencies.get(root, [])))]

        while stack:
            node, pending = stack[-1]
            dep = next(pending, None)

            if dep is None:
                stack.pop()
                state[node] = VisitState.DONE
                order.append(node)
                continue

            # IN_PROGRESS here is a back edge: part of a cycle, drop it
            if state.get(dep, VisitState.UNVISITED) is VisitState.UNVISITED:
                state[dep] = VisitState.IN_PROGRESS
                stack.append((dep, iter(dependencies.get(dep, []))))

    return order
