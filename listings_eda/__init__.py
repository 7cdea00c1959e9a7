"""Asheville Airbnb listings: cleaning pipeline and exploratory analysis."""
