"""Test suite for posesandbox."""
