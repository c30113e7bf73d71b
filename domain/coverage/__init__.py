"""Coverage Bounded Context.

Responsible for choosing a single camera position:
- Value Objects: CoverageResult, SelectionStrategy
- Services: select_best_coverage (brute force, k-d tree, grid search)
"""
