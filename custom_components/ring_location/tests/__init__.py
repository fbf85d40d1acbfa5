"""Tests for the Ring Location integration."""
