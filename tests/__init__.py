"""Tests for surveyor."""
