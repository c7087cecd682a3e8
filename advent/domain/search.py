"""Uniform-cost state-space search with optional all-optimal-paths tracking."""

import logging
from dataclasses import replace
from typing import Dict, Generic, Hashable, List, Optional, Set, TypeVar

from ..errors import SearchLimitExceeded
from .path import collect_optimal_states, reconstruct_path
from .priority_queue import PriorityQueue
from .types import Coord, SearchConfig, SearchProblem, SearchResult

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)


class StateSearch(Generic[S]):
    """
    Dijkstra-style search over an arbitrary hashable state space.

    In "single" mode the first goal popped from the frontier ends the search.
    In "all_paths" mode every entry that costs no more than the best goal is
    still drained, and equal-cost arrivals are kept as extra predecessors so
    every minimum-cost path can be rebuilt afterwards.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.problem: Optional[SearchProblem[S]] = None
        self.config = SearchConfig()
        self.frontier: PriorityQueue[S] = PriorityQueue()
        self.best_cost: Dict[S, int] = {}
        self.parents: Dict[S, Optional[S]] = {}
        self.predecessors: Dict[S, Set[S]] = {}
        self.finalized: Set[S] = set()
        self.goal_states: List[S] = []
        self.best_goal_cost: Optional[int] = None
        self.nodes_expanded = 0
        self._result: Optional[SearchResult[S]] = None

    def initialize(self, problem: SearchProblem[S], config: Optional[SearchConfig] = None):
        """Initialize the search with a problem and configuration."""
        self.reset()
        self.problem = problem
        self.config = config or SearchConfig()

        start = problem.start
        self.best_cost[start] = 0
        self.parents[start] = None
        self.predecessors[start] = set()
        self.frontier.push(0, start, self._priority(0, start))

    def step(self) -> Optional[SearchResult[S]]:
        """
        Pop and process one frontier entry.
        Returns SearchResult if the search is complete, None otherwise.
        """
        if self.problem is None:
            raise ValueError("Search not initialized")
        if self._result is not None:
            return self._result

        peeked = self.frontier.peek()
        if peeked is None:
            return self._finish()

        priority, cost, state = peeked
        if self.best_goal_cost is not None and priority > self.best_goal_cost:
            # Everything left is strictly worse than the best goal
            return self._finish()
        self.frontier.pop_min()

        # Stale entry or state already settled at its minimum cost
        if cost > self.best_cost[state] or state in self.finalized:
            return None
        self.finalized.add(state)

        if self.problem.is_goal(state):
            if self.best_goal_cost is None:
                self.best_goal_cost = cost
            if cost == self.best_goal_cost:
                self.goal_states.append(state)
            if not self.config.collect_all_paths:
                return self._finish()
            return None

        self._expand(state, cost)
        return None

    def run_complete(self) -> SearchResult[S]:
        """
        Run the search until completion.
        Returns the final SearchResult.
        """
        while True:
            result = self.step()
            if result is not None:
                return result

    def is_complete(self) -> bool:
        """Check if the search has completed (success or failure)."""
        return self._result is not None

    def distances(self) -> Dict[S, int]:
        """Minimum cost of every state settled so far."""
        return {state: self.best_cost[state] for state in self.finalized}

    def _expand(self, state: S, cost: int):
        self.nodes_expanded += 1
        limit = self.config.max_expansions
        if limit is not None and self.nodes_expanded > limit:
            raise SearchLimitExceeded(limit)

        problem = self.problem
        all_paths = self.config.collect_all_paths

        for next_state, step_cost in problem.expand(state):
            if step_cost < 0:
                raise ValueError(
                    f"Negative step cost {step_cost} from {state} to {next_state}"
                )
            if problem.is_blocked is not None and problem.is_blocked(next_state):
                continue

            new_cost = cost + step_cost
            known = self.best_cost.get(next_state)

            if known is None or new_cost < known:
                self.best_cost[next_state] = new_cost
                self.parents[next_state] = state
                self.predecessors[next_state] = {state}
                self.frontier.push(new_cost, next_state, self._priority(new_cost, next_state))
            elif new_cost == known and all_paths:
                # Equal-cost alternate route; merge instead of discarding
                self.predecessors[next_state].add(state)

    def _priority(self, cost: int, state: S) -> float:
        heuristic = self.problem.heuristic
        if heuristic is None:
            return cost
        return cost + heuristic(state)

    def _finish(self) -> SearchResult[S]:
        result: SearchResult[S] = SearchResult(nodes_expanded=self.nodes_expanded)

        if self.goal_states:
            position = self.problem.position
            result.found = True
            result.cost = self.best_goal_cost
            result.goal_states = list(self.goal_states)
            result.path = reconstruct_path(self.goal_states[0], self.parents)

            if self.config.collect_all_paths:
                states = collect_optimal_states(self.goal_states, self.predecessors)
            else:
                states = set(result.path)
            result.positions = {position(s) for s in states}

        logger.debug(
            f"Search finished: mode={self.config.mode} found={result.found} "
            f"cost={result.cost} expanded={result.nodes_expanded}"
        )
        self._result = result
        return result


def find_path(problem: SearchProblem[S], config: Optional[SearchConfig] = None) -> SearchResult[S]:
    """
    Convenience function to run a search from start to finish.

    Args:
        problem: States, transitions and goal predicate
        config: Search configuration (single-answer mode by default)

    Returns:
        SearchResult with cost, one optimal path and statistics.
        An unreachable goal gives ``found=False`` rather than an error.
    """
    search: StateSearch[S] = StateSearch()
    search.initialize(problem, config)
    return search.run_complete()


def lowest_cost(problem: SearchProblem[S]) -> Optional[int]:
    """Minimum cost to any goal state, or None if no goal is reachable."""
    return find_path(problem).cost


def optimal_positions(problem: SearchProblem[S]) -> Set[Coord]:
    """All positions on any minimum-cost path; empty if unreachable."""
    return find_path(problem, SearchConfig(mode="all_paths")).positions


def _never(state: Hashable) -> bool:
    return False


def cost_map(problem: SearchProblem[S], config: Optional[SearchConfig] = None) -> Dict[S, int]:
    """
    Minimum cost from the start to every reachable state.
    The problem's goal predicate and heuristic are ignored; the whole
    reachable space is explored.
    """
    search: StateSearch[S] = StateSearch()
    search.initialize(replace(problem, is_goal=_never, heuristic=None), config)
    search.run_complete()
    return search.distances()
