"""
HTTP API for Campaign Similarity.

The browser client posts its current campaign snapshot and receives ranked
similar campaigns, similarity groups and campaign summaries back.
"""
