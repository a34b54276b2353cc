"""
Test suite for the 2-D circle geometry core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
