"""Tests for the MangaCross feed builder."""
