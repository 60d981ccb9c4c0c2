"""flatwiki - a personal wiki backed by one text file per page."""
