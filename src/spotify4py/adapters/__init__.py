"""Adapters: HTTP plumbing and the Spotify Web API binding."""
