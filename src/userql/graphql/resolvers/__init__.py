"""Resolver package for GraphQL schema.

Resolvers are plain synchronous functions over the in-memory user store;
the root query type in ``queries.root`` delegates to them.
"""
