"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that several features use
(DB handle, errors, settings, the Discord client). Feature-specific SQL and
business logic stays in the feature package (e.g. `posts/`).
"""
