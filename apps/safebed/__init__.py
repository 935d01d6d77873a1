"""SafeBed Locations API."""
