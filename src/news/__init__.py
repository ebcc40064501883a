"""
News Module
===========

Ticker news aggregation:
- Finnhub company news (primary) and NewsAPI search (secondary)
- Placeholder item when no provider has news
- In-process pagination for sources without native paging
- Traditional Chinese translation with a TTL cache and finance keyword pass
"""
