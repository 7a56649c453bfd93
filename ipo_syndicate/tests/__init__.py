"""
Tests for the syndicate extraction package.
"""
