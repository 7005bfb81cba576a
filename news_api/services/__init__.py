# Services package.
#
# Each module exposes a focused set of async functions that issue
# parameterized queries for a single table and shape the rows:
#
#   topic_service   - topic listing and existence checks
#   article_service - article detail/list with comment counts, vote updates
#   comment_service - comment listing, creation and deletion per article
#   user_service    - user listing and lookup
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Missing rows are reported by raising the typed
# errors from ``news_api.errors``; database errors propagate unchanged.
