"""
TMDb search data provider.

This package holds the library code behind the `tmdbclientdataprovider` CLI:
- the TMDb HTTP client in `integrations/`
- poster download helpers in `media/`
- search result models and normalization in `models/` and `search/`

The CLI entrypoint (`tmdb_data_provider.cli`) imports from these modules and not
the other way around.
"""
