#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Skip tests that wait on the background sweeper thread
    uv run python -m pytest tests/ -v -m "not slow"
"""

SAMPLE_RESUME = """John Doe
john.doe@example.com
+1-555-123-4567
Skills: JavaScript, React, Node.js, Python
Experience:
Software Engineer at Tech Corp (2020-2023)
Education:
Bachelor of Science in Computer Science
University of Technology (2020)
"""


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
