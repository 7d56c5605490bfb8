"""Tests for schemagen."""
