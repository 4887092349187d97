"""
Community Board UI - Flask + HTMX frontend for the community REST API.

Provides CRUD views for job postings, local alerts and community events,
and a rotating carousel on the home page.
"""
