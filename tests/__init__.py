"""
Test suite for the BigInt arithmetic engine

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/properties/    : Hypothesis property tests against int as oracle
"""
