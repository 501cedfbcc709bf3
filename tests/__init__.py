"""Test suite for the content cache server."""
