"""Batch scripts: posting matches and weekly digests."""
