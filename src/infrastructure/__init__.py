"""Infrastructure Layer.

Adapters around the domain: logging setup, random data generation, timing
harness and CSV reporting. All I/O lives here, never in domain/.
"""
