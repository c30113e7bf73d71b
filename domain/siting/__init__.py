"""Siting Bounded Context.

Responsible for multi-camera placement over a proximity graph:
- Value Objects: DominatingSet
- Services: approximate_dominating_set (greedy), is_dominating_set
"""
