"""Run defaults shared by the console scripts, the benchmark harness and tests.

Kept free of project imports so any layer can depend on it.
"""

from __future__ import annotations
