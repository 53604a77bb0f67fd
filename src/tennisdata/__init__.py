"""Tennis rankings and tournament standings scraper."""
