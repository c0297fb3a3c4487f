"""Business logic services.

Services contain all business logic and are called by routes.
Ranking, search and expiry are pure and take their inputs (including "now")
explicitly; the rest talk to the stores.
"""
